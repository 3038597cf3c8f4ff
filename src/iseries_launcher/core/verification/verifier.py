from __future__ import annotations

"""
Core File Verification Service.

Walks the declared file structure and checks that every leaf file is
present under the launch directory. Verification is best-effort: a
missing file is logged and reported to the user, then the walk carries
on. The caller decides what, if anything, is fatal.
"""

import logging
import os
from typing import List, Optional

from iseries_launcher.domain.file_structure import FileStructure
from iseries_launcher.domain.launch_models import VerificationEvent, VerificationReport
from iseries_launcher.infra.fs import file_exists
from iseries_launcher.interface.notifier import Notifier
from iseries_launcher.utils.i18n import i18n

logger = logging.getLogger(__name__)


def verify_structure(
        structure: FileStructure,
        base_dir: str,
        notifier: Optional[Notifier] = None,
) -> VerificationReport:
    """
    Verify that every file the structure describes exists on disk.

    Internal (directory) nodes are never checked themselves; only their
    leaves are. Each leaf produces exactly one event, in walk order.

    Args:
        structure: The expected file layout.
        base_dir: Directory the relative paths are resolved against.
        notifier: Receives one warning per missing file, if given.

    Returns:
        VerificationReport: Found/missing outcome of every leaf.
    """
    events: List[VerificationEvent] = []

    for index in structure.walk():
        if not structure.node(index).is_leaf:
            continue

        rel_path = structure.relative_path(index)
        found = file_exists(os.path.join(base_dir, rel_path))
        events.append(VerificationEvent(path=rel_path, found=found))

        if found:
            logger.info(f"Found core file: {rel_path}")
            continue

        logger.warning(f"Core file: {rel_path} is missing...")
        if notifier is not None:
            notifier.warn(i18n.t("launcher.warnings.missing_file", path=rel_path))

    return VerificationReport(events=tuple(events))
