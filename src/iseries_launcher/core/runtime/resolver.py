from __future__ import annotations

"""
Runtime Chipset Resolver.

Decides which bundled JRE (x32 or x64) the application is launched
with, from the runtimes that are present, the host architecture and an
optional '--architecture' command-line override. Resolution either
yields a chipset or a fatal exit code; it never raises and never talks
to the user directly.
"""

import logging
from typing import List, Sequence

from iseries_launcher.domain import constants as const
from iseries_launcher.domain.chipset import Chipset
from iseries_launcher.domain.exit_codes import ExitCode
from iseries_launcher.domain.launch_models import (
    ChipsetResolution,
    create_failed,
    create_resolved,
)

logger = logging.getLogger(__name__)

WARN_X32_ON_X64 = "launcher.warnings.x32_on_x64"

# -----------------------------------------------------------------------------
# COMMAND LINE OVERRIDE
# -----------------------------------------------------------------------------

def parse_chipset_from_args(args: Sequence[str]) -> Chipset:
    """
    Find the runtime chipset the user asked for on the command line.

    Accepts '--architecture=x64', '--ARCHITECTURE=64', '--architecture 32'
    and similar spellings within a single argument. Arguments whose value
    is not recognised are skipped, so the first valid one wins.

    Args:
        args: Raw command-line arguments (without the program name).

    Returns:
        Chipset: X32 or X64 if chosen, UNDETERMINED otherwise.
    """
    token = const.ARCHITECTURE_TOKEN
    for arg in args:
        if not arg.lower().startswith(token):
            continue

        value = arg[len(token):].replace("=", "").replace(" ", "").lower()
        if value in const.X64_VALUES:
            return Chipset.X64
        if value in const.X32_VALUES:
            return Chipset.X32

        logger.debug(f"Ignoring unrecognised architecture argument: {arg!r}")

    return Chipset.UNDETERMINED

# -----------------------------------------------------------------------------
# RESOLUTION
# -----------------------------------------------------------------------------

def resolve_chipset(
        has_x32: bool,
        has_x64: bool,
        is_64bit_host: bool,
        explicit_choice: Chipset = Chipset.UNDETERMINED,
) -> ChipsetResolution:
    """
    Determine the runtime chipset to launch with.

    1. No runtime at all is fatal (NO_RUNTIME).
    2. A 64-bit host with only the x32 runtime raises a warning.
    3. A 32-bit host without the x32 runtime is fatal (NO_X32_RUNTIME).
    4. With both runtimes the explicit choice wins, else the host width.
    5. With a single runtime, that runtime is used.

    Args:
        has_x32: Whether the x32 runtime executable exists.
        has_x64: Whether the x64 runtime executable exists.
        is_64bit_host: Whether the operating system is 64-bit.
        explicit_choice: Chipset requested on the command line.

    Returns:
        ChipsetResolution: The chosen chipset or the fatal exit code.
    """
    warnings: List[str] = []

    if not (has_x32 or has_x64):
        logger.error("No JRE runtime found.")
        return create_failed(ExitCode.NO_RUNTIME, warnings)

    if is_64bit_host and not has_x64:
        logger.warning("Using x32bit runtime on x64bit environment.")
        warnings.append(WARN_X32_ON_X64)

    if not is_64bit_host and not has_x32:
        logger.error("No x32bit runtime found for an x32bit environment.")
        return create_failed(ExitCode.NO_X32_RUNTIME, warnings)

    if has_x32 and has_x64:
        chipset = explicit_choice
        if chipset is Chipset.UNDETERMINED:
            chipset = Chipset.X64 if is_64bit_host else Chipset.X32
    elif has_x32:
        chipset = Chipset.X32
    else:
        chipset = Chipset.X64

    logger.info(f"Determined chipset: {chipset.label}")
    return create_resolved(chipset, warnings)
