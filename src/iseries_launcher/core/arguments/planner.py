from __future__ import annotations

"""
Launcher Argument Planning.

Separates launcher-only flags from the arguments forwarded to the
application. Matching is a case-insensitive prefix test, so '--shellish'
counts as '--shell' and '--ARCHITECTURE=64' as '--architecture'.
"""

from typing import Iterable, List, Sequence

from iseries_launcher.domain.constants import RESERVED_PREFIXES, SHELL_TOKEN


def detect_shell_flag(args: Sequence[str]) -> bool:
    """
    Check whether a visible console window was requested.

    The flag is only detected here; removing it is filter_arguments' job.

    Args:
        args: Raw command-line arguments.

    Returns:
        bool: True if any argument starts with '--shell'.
    """
    return any(_has_prefix(arg, SHELL_TOKEN) for arg in args)


def filter_arguments(
        args: Sequence[str],
        reserved: Iterable[str] = RESERVED_PREFIXES,
) -> List[str]:
    """
    Drop launcher-only arguments from a copy of the command line.

    Order and duplicates of the remaining arguments are preserved and the
    caller's sequence is left untouched.

    Args:
        args: Raw command-line arguments.
        reserved: Prefixes of the arguments to remove.

    Returns:
        List[str]: Arguments to forward to the application.
    """
    prefixes = tuple(reserved)
    return [arg for arg in list(args) if not any(_has_prefix(arg, p) for p in prefixes)]


def _has_prefix(arg: str, prefix: str) -> bool:
    return arg.lower().startswith(prefix.lower())
