"""Action dispatcher - runs the requested initialization actions for one directory."""

import logging
import subprocess
from collections.abc import Iterable
from pathlib import Path

from .errors import ActionError
from .models import ActionResult, ActionSpec, ActionStatus, FileWrite, ShellCommand
from .registry import ActionRegistry, get_registry
from .reporter import Reporter
from .runner import ProcessRunner, run_shell_action
from .settings import DrakoSettings, get_settings
from .templates import template_context

logger = logging.getLogger(__name__)


def write_template_file(directory: str, effect: FileWrite, settings: DrakoSettings) -> Path:
    """Render ``effect`` and write it into ``directory``, overwriting any existing file.

    Raises:
        ActionError: If the file cannot be written
    """
    target = Path(directory) / effect.filename
    content = effect.render(template_context(directory, settings))
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ActionError(e.strerror or str(e)) from e
    return target


def run_file_action(
    directory: str,
    spec: ActionSpec,
    flag: str,
    reporter: Reporter,
    verbose: bool,
    settings: DrakoSettings,
) -> ActionResult:
    effect = spec.effect
    try:
        write_template_file(directory, effect, settings)
    except ActionError as e:
        reporter.error(f"Failed to create {effect.filename} in", directory, detail=str(e))
        return ActionResult(
            status=ActionStatus.FAILED, flag=flag, action=spec.name, reason=str(e)
        )

    if verbose:
        reporter.success(f"Created {effect.filename} in", directory)
    return ActionResult(status=ActionStatus.SUCCEEDED, flag=flag, action=spec.name)


def dispatch_actions(
    directory: str,
    flags: Iterable[str],
    reporter: Reporter,
    verbose: bool = False,
    registry: ActionRegistry | None = None,
    runner: ProcessRunner = subprocess.run,
    settings: DrakoSettings | None = None,
) -> list[ActionResult]:
    """Run the action for every flag, in order, inside ``directory``.

    Flags are not deduplicated. An unknown flag or a failing action is
    reported and recorded; the remaining flags still run.

    Args:
        directory: Already provisioned target directory
        flags: Flag tokens for the whole invocation
        reporter: Diagnostic sink
        verbose: Report successful actions too
        registry: Token -> action lookup (built-in actions by default)
        runner: Process runner for shell actions
        settings: Settings supplying shell, timeout and template values

    Returns:
        One ActionResult per flag
    """
    registry = registry or get_registry()
    settings = settings or get_settings()

    results: list[ActionResult] = []
    for flag in flags:
        spec = registry.resolve(flag)

        if spec is None:
            reporter.error("Unknown flag:", flag)
            results.append(ActionResult(status=ActionStatus.UNRECOGNIZED, flag=flag))
            continue

        logger.debug(f"Dispatching {spec.name} for {flag} in {directory}")
        if isinstance(spec.effect, ShellCommand):
            result = run_shell_action(
                directory,
                spec.effect.render(directory),
                verbose,
                reporter,
                runner=runner,
                shell=settings.shell,
                timeout=settings.command_timeout,
                flag=flag,
                action=spec.name,
            )
        else:
            result = run_file_action(directory, spec, flag, reporter, verbose, settings)
        results.append(result)

    return results
