"""
Centralized Pydantic models for the drako provisioning pipeline.

This module contains the data passed between pipeline stages:
- ParsedArgs from the argument classifier
- ActionSpec (with its ShellCommand / FileWrite effects) from the registry
- ProvisionResult and ActionResult outcomes
- DirectoryReport / PipelineReport summaries from the driver
"""

import shlex
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from jinja2 import StrictUndefined, Template
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Core Enums
# =============================================================================

class ProvisionStatus(str, Enum):
    """Outcome of provisioning a single directory."""
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    CREATION_FAILED = "creation_failed"


class ActionStatus(str, Enum):
    """Outcome of a single initialization action."""
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    UNRECOGNIZED = "unrecognized"


# =============================================================================
# Classifier Models
# =============================================================================

class ParsedArgs(BaseModel):
    """Command-line tokens partitioned by the argument classifier."""

    model_config = ConfigDict(frozen=True)

    directories: tuple[str, ...] = ()
    flags: tuple[str, ...] = ()
    permission_mode: int | None = Field(default=None, ge=0, le=0o777)
    verbose: bool = False


# =============================================================================
# Action Models
# =============================================================================

def project_name(directory: str) -> str:
    """Base name of ``directory`` used as a module or package name."""
    name = Path(directory).name
    if name in ("", ".."):
        name = Path(directory).resolve().name
    return name


class ShellCommand(BaseModel):
    """Shell command run inside the target directory.

    ``template`` may reference ``{name}`` (the directory base name, shell
    quoted) and ``{dir}`` (the directory as given, shell quoted).
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["shell"] = "shell"
    template: str

    def render(self, directory: str) -> str:
        return self.template.format(
            name=shlex.quote(project_name(directory)),
            dir=shlex.quote(directory),
        )


class FileWrite(BaseModel):
    """Jinja2 template written to ``filename`` inside the target directory."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    filename: str
    template: str

    def render(self, context: dict[str, Any]) -> str:
        template = Template(
            self.template,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        return template.render(**context)


ActionEffect = Annotated[Union[ShellCommand, FileWrite], Field(discriminator="kind")]


class ActionSpec(BaseModel):
    """An initialization action and the flag tokens that trigger it."""

    model_config = ConfigDict(frozen=True)

    name: str
    triggers: frozenset[str]
    effect: ActionEffect
    description: str = ""


# =============================================================================
# Result Models
# =============================================================================

class ProvisionResult(BaseModel):
    """Per-directory provisioning outcome."""

    status: ProvisionStatus
    path: str
    reason: str | None = None

    @property
    def created(self) -> bool:
        return self.status is ProvisionStatus.CREATED


class ActionResult(BaseModel):
    """Per-action outcome. Never aborts sibling actions or directories."""

    status: ActionStatus
    flag: str
    action: str | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ActionStatus.SUCCEEDED


class DirectoryReport(BaseModel):
    """Everything that happened to one requested directory."""

    directory: str
    provision: ProvisionResult
    permissions_applied: bool | None = None
    actions: list[ActionResult] = Field(default_factory=list)


class PipelineReport(BaseModel):
    """Result of a whole invocation."""

    directories: list[DirectoryReport] = Field(default_factory=list)
    exit_code: int = 0

    def by_status(self, status: ProvisionStatus) -> list[DirectoryReport]:
        """Directory reports whose provisioning ended in ``status``."""
        return [d for d in self.directories if d.provision.status is status]
