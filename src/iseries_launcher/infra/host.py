from __future__ import annotations

"""
Host Platform Detection.

Answers the single question the launcher asks about the host: is the
operating system 64-bit, independently of the interpreter's own width.
"""

import logging
import os
import platform

logger = logging.getLogger(__name__)


def is_64bit_host() -> bool:
    """
    Detect whether the host operating system is 64-bit.

    A 32-bit process on 64-bit Windows reports an x86 machine but sets
    PROCESSOR_ARCHITEW6432, so that variable is checked as well.

    Returns:
        bool: True for AMD64, x86_64, aarch64 and arm64 hosts.
    """
    if os.name == "nt" and os.environ.get("PROCESSOR_ARCHITEW6432"):
        return True

    machine = (platform.machine() or "").lower()
    logger.debug(f"Host machine type: {machine or 'unknown'}")
    return machine.endswith("64")
