"""
Pytest configuration and fixtures for drako tests.
"""

import subprocess
import tempfile
from pathlib import Path

import pytest

from drako.reporter import BufferedReporter
from drako.settings import DrakoSettings


class FakeRunner:
    """Stands in for ``subprocess.run`` and records every call."""

    def __init__(self, returncode=0, stderr="", raises=None):
        self.returncode = returncode
        self.stderr = stderr
        self.raises = raises
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if self.raises is not None:
            raise self.raises
        return subprocess.CompletedProcess(
            args, self.returncode, stdout="", stderr=self.stderr
        )

    @property
    def commands(self):
        return [args[-1] for args, _ in self.calls]


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def reporter():
    """Reporter that records messages for assertions."""
    return BufferedReporter()


@pytest.fixture
def fake_runner():
    """Process runner whose commands always succeed."""
    return FakeRunner()


@pytest.fixture
def settings():
    """Settings independent of the caller's DRAKO_* environment."""
    return DrakoSettings(
        shell="sh",
        command_timeout=None,
        jobs=1,
        license_author="[YOUR NAME]",
        license_year="[YEAR]",
    )
