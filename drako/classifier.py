"""Argument classifier.

Partitions raw command-line tokens into target directories, action flags,
an optional permission mode and the verbosity switch. Classification never
fails: a token that looks like a permission mode but is not valid octal is
kept as a flag so the dispatcher can report it.
"""

import logging
from collections.abc import Iterable

from .models import ParsedArgs

logger = logging.getLogger(__name__)

VERBOSE_TOKENS = frozenset({"--verbose", "-v"})
HELP_TOKENS = frozenset({"--help", "-h"})
VERSION_TOKENS = frozenset({"--version"})

_OCTAL_DIGITS = frozenset("01234567")
_MAX_MODE_DIGITS = 3


def parse_permission_mode(token: str) -> int | None:
    """Parse a ``-NNN`` token into a 9-bit permission mode.

    The part after the single leading dash must be one to three octal
    digits. Anything else returns None.

    Examples:
        >>> parse_permission_mode("-755")
        493
        >>> parse_permission_mode("-7")
        7
        >>> parse_permission_mode("-999") is None
        True
    """
    if not token.startswith("-"):
        return None
    digits = token[1:]
    if not digits or len(digits) > _MAX_MODE_DIGITS:
        return None
    if not all(c in _OCTAL_DIGITS for c in digits):
        return None
    return int(digits, 8)


def classify(tokens: Iterable[str]) -> ParsedArgs:
    """Classify ``tokens`` (program name excluded) in a single pass.

    Rules, applied left to right per token:

    1. no leading ``-``: a directory, kept in order, duplicates included
    2. ``--verbose`` / ``-v``: switches verbose on
    3. leading ``--``: a long flag, kept verbatim
    4. single dash: a permission mode if it parses as one (the last one
       wins), otherwise a flag

    ``-`` and ``--`` on their own end up as flags.

    Args:
        tokens: Raw command-line tokens

    Returns:
        Immutable ParsedArgs
    """
    directories: list[str] = []
    flags: list[str] = []
    permission_mode: int | None = None
    verbose = False

    for token in tokens:
        if not token.startswith("-"):
            directories.append(token)
            continue

        if token in VERBOSE_TOKENS:
            verbose = True
        elif token.startswith("--"):
            flags.append(token)
        else:
            mode = parse_permission_mode(token)
            if mode is None:
                flags.append(token)
                continue
            if permission_mode is not None:
                logger.debug(
                    f"Permission mode {permission_mode:o} overridden by {token}"
                )
            permission_mode = mode

    return ParsedArgs(
        directories=tuple(directories),
        flags=tuple(flags),
        permission_mode=permission_mode,
        verbose=verbose,
    )


def wants_help(tokens: Iterable[str]) -> bool:
    """True if ``--help`` or ``-h`` appears anywhere in ``tokens``."""
    return any(token in HELP_TOKENS for token in tokens)


def wants_version(tokens: Iterable[str]) -> bool:
    """True if ``--version`` appears anywhere in ``tokens``."""
    return any(token in VERSION_TOKENS for token in tokens)
