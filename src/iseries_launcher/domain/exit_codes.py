from __future__ import annotations

"""
Launcher Exit Codes.

Every way the launcher process can terminate, each with a short
description used in diagnostics.
"""

from enum import IntEnum
from typing import Dict


class ExitCode(IntEnum):
    """Process exit codes returned by the launcher entry point."""
    NORMAL = 0
    UNEXPECTED_ERROR = 11
    START_FAILURE = 16
    NO_RUNTIME = 20
    NO_X32_RUNTIME = 21
    INTERRUPTED = 130

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: Dict[ExitCode, str] = {
    ExitCode.NORMAL: "Normal exit.",
    ExitCode.UNEXPECTED_ERROR: "An unexpected error occurred preventing the launcher from continuing.",
    ExitCode.START_FAILURE: "The application process could not be started.",
    ExitCode.NO_RUNTIME: "No JRE runtime was found.",
    ExitCode.NO_X32_RUNTIME: "No x32bit JRE runtime was found for an x32bit host.",
    ExitCode.INTERRUPTED: "Interrupted by the user.",
}
