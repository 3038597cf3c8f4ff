from __future__ import annotations

"""
JRE Runtime Locator.

Helper around one bundled JRE root directory. Reports whether the java
executable is present; it does not check that the binary runs or that
its architecture matches the folder it was found in.
"""

import logging
import os

from iseries_launcher.domain.constants import RUNTIME_EXECUTABLE
from iseries_launcher.infra.fs import file_exists

logger = logging.getLogger(__name__)


class RuntimeLocator:
    """Existence check for the runtime executable below a JRE root."""

    def __init__(self, directory: str, executable: str = RUNTIME_EXECUTABLE) -> None:
        """
        Args:
            directory: Top level directory of the JRE environment.
            executable: Executable path relative to that directory.
        """
        self._directory = directory
        self._executable = executable

    @property
    def directory(self) -> str:
        return self._directory

    @property
    def executable_path(self) -> str:
        return os.path.join(self._directory, self._executable)

    def check(self) -> bool:
        """
        Check whether the runtime is present by looking for its executable.

        Returns:
            bool: True if the executable exists, False otherwise.
        """
        path = self.executable_path
        logger.info(f"Looking for JRE at: {path}")
        return file_exists(path)

    def __repr__(self) -> str:
        return f"RuntimeLocator({self._directory!r})"
