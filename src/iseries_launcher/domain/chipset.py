from __future__ import annotations

"""
Chipset Domain Model.

Defines the CPU/runtime width enumeration shared by host detection,
the command-line override parser and the runtime resolver.
"""

from enum import Enum


class Chipset(Enum):
    """A CPU or runtime width, or the absence of an explicit choice."""
    X32 = "x32"
    X64 = "x64"
    UNDETERMINED = "undetermined"

    @property
    def label(self) -> str:
        """Human readable width used in diagnostics (e.g. 'x64bit')."""
        if self is Chipset.UNDETERMINED:
            return "undetermined"
        return f"{self.value}bit"
