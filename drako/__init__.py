"""
Drako - create project directories with consistent boilerplate.

Give drako one or more directory paths and a set of flags: each directory is
created (with an optional permission mode) and then initialized with the
requested actions, such as a Git repository, a package manager project or
generated README / LICENSE / Dockerfile templates.
"""

from .classifier import classify
from .core import Pipeline
from .models import ActionResult, ParsedArgs, PipelineReport, ProvisionResult
from .settings import DrakoSettings, get_settings, reload_settings

__version__ = "0.2.0"

__all__ = [
    "ActionResult",
    "DrakoSettings",
    "ParsedArgs",
    "Pipeline",
    "PipelineReport",
    "ProvisionResult",
    "classify",
    "get_settings",
    "reload_settings",
]
