"""Shell action execution.

Runs one initialization command inside a target directory and turns the
outcome into an :class:`~drako.models.ActionResult`. The process runner is a
parameter (``subprocess.run`` by default) so tests can substitute a fake.
"""

import logging
import subprocess
from collections.abc import Callable
from typing import Any

from .models import ActionResult, ActionStatus
from .reporter import Reporter

logger = logging.getLogger(__name__)

ProcessRunner = Callable[..., subprocess.CompletedProcess]


def run_shell_action(
    directory: str,
    command: str,
    verbose: bool,
    reporter: Reporter,
    runner: ProcessRunner = subprocess.run,
    shell: str = "sh",
    timeout: float | None = None,
    flag: str = "",
    action: str | None = None,
) -> ActionResult:
    """Run ``command`` through ``shell -c`` with ``directory`` as cwd.

    Blocks until the command exits. A non-zero exit status, a spawn failure
    or a timeout is reported (with the command's standard error when there
    is any) and returned as a FAILED result; nothing is raised.

    Args:
        directory: Working directory for the command
        command: Fully rendered command line
        verbose: Report successful runs too
        reporter: Diagnostic sink
        runner: Callable with the ``subprocess.run`` signature
        shell: Shell executable used to interpret ``command``
        timeout: Seconds before the command is abandoned, None waits forever
        flag: Flag token that requested the action, copied into the result
        action: Action name, copied into the result

    Returns:
        ActionResult with SUCCEEDED or FAILED status
    """
    logger.debug(f"Running {command!r} in {directory}")
    kwargs: dict[str, Any] = {
        "cwd": directory,
        "capture_output": True,
        "text": True,
        "errors": "replace",
        "check": False,
    }
    if timeout is not None:
        kwargs["timeout"] = timeout

    try:
        completed = runner([shell, "-c", command], **kwargs)
    except subprocess.TimeoutExpired:
        reason = f"timed out after {timeout}s"
        reporter.error(f"Error running {command} in", directory, detail=reason)
        return ActionResult(status=ActionStatus.FAILED, flag=flag, action=action, reason=reason)
    except (OSError, subprocess.SubprocessError) as e:
        reporter.error(f"Error running {command} in", directory, detail=str(e))
        return ActionResult(status=ActionStatus.FAILED, flag=flag, action=action, reason=str(e))

    if completed.returncode != 0:
        stderr = (completed.stderr or "").strip()
        reporter.error(f"Failed: {command} in", directory, detail=stderr or None)
        reason = stderr or f"exit status {completed.returncode}"
        return ActionResult(status=ActionStatus.FAILED, flag=flag, action=action, reason=reason)

    if verbose:
        reporter.success(f"Ran {command} in", directory)
    return ActionResult(status=ActionStatus.SUCCEEDED, flag=flag, action=action)
