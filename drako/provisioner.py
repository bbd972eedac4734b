"""Directory provisioner - creates target directories and sets their mode."""

import logging
import os
from pathlib import Path

from .models import ProvisionResult, ProvisionStatus
from .reporter import Reporter

logger = logging.getLogger(__name__)


def _os_reason(error: OSError) -> str:
    return error.strerror or str(error)


def provision_directory(path: str, reporter: Reporter, verbose: bool = False) -> ProvisionResult:
    """Create ``path`` and any missing parents.

    A path that already exists is never touched: the result is
    ALREADY_EXISTS and a warning names the path. Creation failures are
    reported and returned as CREATION_FAILED rather than raised.

    Args:
        path: Directory path as given on the command line
        reporter: Diagnostic sink
        verbose: Report successful creation with the absolute path

    Returns:
        ProvisionResult for this directory
    """
    target = Path(path)

    # os.path.exists treats any stat error as missing; mkdir then reports it
    if os.path.exists(path):
        reporter.warn("Directory already exists", path)
        return ProvisionResult(status=ProvisionStatus.ALREADY_EXISTS, path=path)

    try:
        target.mkdir(parents=True)
    except OSError as e:
        reason = _os_reason(e)
        logger.debug(f"mkdir {path} failed: {e!r}")
        reporter.error("Failed to create directory", path, detail=reason)
        return ProvisionResult(
            status=ProvisionStatus.CREATION_FAILED, path=path, reason=reason
        )

    if verbose:
        try:
            shown = str(target.resolve(strict=True))
        except OSError:
            shown = path
        reporter.success("Created directory", shown)
    return ProvisionResult(status=ProvisionStatus.CREATED, path=path)


def apply_permissions(path: str, mode: int, reporter: Reporter, verbose: bool = False) -> bool:
    """Set the 9-bit permission ``mode`` on ``path`` verbatim.

    Failure is reported and returns False; the directory is left in place.
    """
    try:
        os.chmod(path, mode)
    except OSError as e:
        logger.debug(f"chmod {mode:o} {path} failed: {e!r}")
        reporter.error("Failed to set permissions on", path, detail=_os_reason(e))
        return False

    if verbose:
        reporter.success(f"Set permissions {mode:o} on", path)
    return True
