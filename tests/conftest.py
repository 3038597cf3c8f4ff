from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a fake installation tree and a recording notifier.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from iseries_launcher.domain.constants import RUNTIME_EXECUTABLE  # noqa: E402
from iseries_launcher.interface.notifier import Notifier  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class RecordingNotifier(Notifier):
    """Notifier that stores every message instead of showing it."""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, str]] = []

    def warn(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    @property
    def warnings(self) -> List[str]:
        return [m for level, m in self.messages if level == "warning"]

    @property
    def errors(self) -> List[str]:
        return [m for level, m in self.messages if level == "error"]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete launcher configuration dictionary.

    Mirrors the keys of 'iseries_launcher.domain.config' with a small
    core file declaration so verification tests stay readable.
    """
    return {
        "additional_arguments": ["-Dflag=1"],
        "jre32_path": os.path.join("runtime", "x32"),
        "jre64_path": os.path.join("runtime", "x64"),
        "working_directory": "bin",
        "launcher_jar": os.path.join("bin", "app.jar"),
        "core_files": {"bin": {"app.jar": None}},
        "log_level": "DEBUG",
        "log_to_file": False,
        "show_dialogs": False,
        "locale": "en",
    }


@pytest.fixture
def make_install(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory building a fake installation directory.

    Args (of the returned callable):
        x32: Create the x32 runtime executable.
        x64: Create the x64 runtime executable.
        files: Extra relative file paths to create.

    Returns:
        Callable[..., Path]: Builder returning the installation root.
    """
    def _make(x32: bool = True, x64: bool = True, files: Tuple[str, ...] = ()) -> Path:
        root = tmp_path / "install"
        root.mkdir(exist_ok=True)
        (root / "bin").mkdir(exist_ok=True)

        for enabled, width in ((x32, "x32"), (x64, "x64")):
            if not enabled:
                continue
            exe = root / "runtime" / width / RUNTIME_EXECUTABLE
            exe.parent.mkdir(parents=True, exist_ok=True)
            exe.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
            exe.chmod(0o755)

        for rel in files:
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("stub", encoding="utf-8")

        return root

    return _make
