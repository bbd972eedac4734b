"""
Drako Core - directory provisioning pipeline.

Pipeline: Classified arguments → for each directory: Provision → Set permissions → Dispatch actions

Every directory is handled independently; nothing that happens to one
directory stops the others.
"""

import logging
import os
import subprocess
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from .dispatcher import dispatch_actions
from .errors import UsageError
from .models import DirectoryReport, ParsedArgs, PipelineReport
from .provisioner import apply_permissions, provision_directory
from .registry import ActionRegistry, get_registry
from .reporter import BufferedReporter, NullReporter, Reporter
from .runner import ProcessRunner
from .settings import DrakoSettings, get_settings

logger = logging.getLogger(__name__)


def independent_paths(directories: Sequence[str]) -> bool:
    """True if no directory repeats or contains another one.

    Only independent directories may be provisioned concurrently; otherwise
    the outcome of one depends on whether another was handled first.
    """
    resolved = [os.path.abspath(d) for d in directories]
    if len(set(resolved)) != len(resolved):
        return False
    for i, first in enumerate(resolved):
        for second in resolved[i + 1:]:
            if os.path.commonpath([first, second]) in (first, second):
                return False
    return True


class Pipeline:
    """Main coordinator for the drako provisioning pipeline."""

    def __init__(
        self,
        reporter: Reporter | None = None,
        registry: ActionRegistry | None = None,
        runner: ProcessRunner = subprocess.run,
        settings: DrakoSettings | None = None,
        jobs: int | None = None,
    ):
        """
        Initialize Pipeline.

        Args:
            reporter: Diagnostic sink (discards output if omitted)
            registry: Action registry (built-in actions if omitted)
            runner: Process runner used for shell actions
            settings: Settings instance (global settings if omitted)
            jobs: Directory worker count (overrides settings)
        """
        self.settings = settings or get_settings()
        self.reporter = reporter or NullReporter()
        self.registry = registry or get_registry()
        self.runner = runner
        self.jobs = jobs or self.settings.jobs

        logger.debug(f"Pipeline initialized with {self.jobs} job(s)")

    def run(self, parsed: ParsedArgs) -> PipelineReport:
        """
        Provision every directory in ``parsed``.

        Args:
            parsed: Classified command-line arguments

        Returns:
            PipelineReport with one DirectoryReport per requested directory

        Raises:
            UsageError: If no directories were supplied
        """
        if not parsed.directories:
            raise UsageError("No directories provided")

        logger.info(
            f"Provisioning {len(parsed.directories)} directories "
            f"with flags {list(parsed.flags)}"
        )

        if self.jobs > 1 and len(parsed.directories) > 1 and independent_paths(parsed.directories):
            reports = self._run_concurrently(parsed)
        else:
            reports = [
                self.process_directory(directory, parsed, self.reporter)
                for directory in parsed.directories
            ]

        logger.info("Provisioning complete")
        return PipelineReport(directories=reports, exit_code=0)

    def process_directory(
        self, directory: str, parsed: ParsedArgs, reporter: Reporter
    ) -> DirectoryReport:
        """
        Provision one directory and, if it was created, initialize it.

        Args:
            directory: Directory path as given on the command line
            parsed: Classified arguments supplying mode, flags and verbosity
            reporter: Diagnostic sink for this directory

        Returns:
            DirectoryReport for this directory
        """
        provision = provision_directory(directory, reporter, parsed.verbose)
        report = DirectoryReport(directory=directory, provision=provision)
        if not provision.created:
            return report

        if parsed.permission_mode is not None:
            report.permissions_applied = apply_permissions(
                directory, parsed.permission_mode, reporter, parsed.verbose
            )

        report.actions = dispatch_actions(
            directory,
            parsed.flags,
            reporter,
            verbose=parsed.verbose,
            registry=self.registry,
            runner=self.runner,
            settings=self.settings,
        )
        return report

    def _run_concurrently(self, parsed: ParsedArgs) -> list[DirectoryReport]:
        """Provision directories on a thread pool, replaying output in order.

        Every buffer is replayed even if a worker raised; the first such
        exception is re-raised afterwards.
        """
        buffers = [BufferedReporter() for _ in parsed.directories]
        with ThreadPoolExecutor(max_workers=self.jobs) as pool:
            futures = [
                pool.submit(self.process_directory, directory, parsed, buffer)
                for directory, buffer in zip(parsed.directories, buffers)
            ]
            reports = []
            failure = None
            for directory, future, buffer in zip(parsed.directories, futures, buffers):
                try:
                    reports.append(future.result())
                except Exception as e:
                    logger.error(f"Provisioning {directory} raised: {e!r}")
                    if failure is None:
                        failure = e
                buffer.replay(self.reporter)
        if failure is not None:
            raise failure
        return reports
