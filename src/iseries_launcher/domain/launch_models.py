from __future__ import annotations

"""
Launch Domain Data Models.

Defines the result objects exchanged between the launch-decision core
and the interface layer: file verification reports, chipset resolution
outcomes and the final process invocation descriptor.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from iseries_launcher.domain.chipset import Chipset
from iseries_launcher.domain.exit_codes import ExitCode

# -----------------------------------------------------------------------------
# FILE VERIFICATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class VerificationEvent:
    """
    Outcome of the existence check of a single core file.

    Attributes:
        path: Path relative to the launch directory.
        found: Whether the file exists on disk.
    """
    path: str
    found: bool


@dataclass(frozen=True)
class VerificationReport:
    """Ordered outcome of a complete file structure verification."""
    events: Tuple[VerificationEvent, ...] = ()

    @property
    def missing(self) -> List[str]:
        return [e.path for e in self.events if not e.found]

    @property
    def found(self) -> List[str]:
        return [e.path for e in self.events if e.found]

    @property
    def complete(self) -> bool:
        return all(e.found for e in self.events)


# -----------------------------------------------------------------------------
# CHIPSET RESOLUTION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ChipsetResolution:
    """
    Outcome of the runtime chipset resolution.

    Exactly one of `chipset` (X32 or X64) or `failure` is meaningful.

    Attributes:
        chipset: Runtime width to launch with, UNDETERMINED on failure.
        failure: Exit code of the fatal condition that aborted resolution.
        warnings: Message keys of non-fatal conditions, in the order raised.
    """
    chipset: Chipset = Chipset.UNDETERMINED
    failure: Optional[ExitCode] = None
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.failure is None


def create_resolved(chipset: Chipset, warnings: List[str]) -> ChipsetResolution:
    """Create a successful resolution for the given X32/X64 chipset."""
    if chipset is Chipset.UNDETERMINED:
        raise ValueError("A successful resolution requires a concrete chipset.")
    return ChipsetResolution(chipset=chipset, warnings=tuple(warnings))


def create_failed(failure: ExitCode, warnings: List[str]) -> ChipsetResolution:
    """Create an aborted resolution carrying its fatal exit code."""
    return ChipsetResolution(failure=failure, warnings=tuple(warnings))


# -----------------------------------------------------------------------------
# PROCESS INVOCATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LaunchDescriptor:
    """
    Fully resolved child process invocation.

    Attributes:
        executable: Absolute path to the runtime executable.
        working_directory: Directory the child process starts in.
        arguments: Fixed args, then the entry jar invocation, then user args.
        with_shell: Whether the child should get a visible console window.
    """
    executable: str
    working_directory: str
    arguments: Tuple[str, ...]
    with_shell: bool = False

    @property
    def command(self) -> List[str]:
        """Executable followed by its arguments, ready for subprocess."""
        return [self.executable, *self.arguments]
