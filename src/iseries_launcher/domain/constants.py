from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to launcher-wide constants: application
identity, reserved command-line tokens, the relative layout of a
packaged installation and the default core file declaration.
"""

import os
from typing import Any, Dict, List, Tuple

APP_NAME = "I-Series"
LAUNCHER_VERSION = "1.2.0"
CONFIG_FILE_NAME = "launcher.json"
LOG_FILE_NAME = "launcher.log"

# -----------------------------------------------------------------------------
# COMMAND LINE SURFACE
# -----------------------------------------------------------------------------

ARCHITECTURE_TOKEN = "--architecture"
SHELL_TOKEN = "--shell"

# Launcher-only flags, never forwarded to the child process
RESERVED_PREFIXES: Tuple[str, ...] = (ARCHITECTURE_TOKEN, SHELL_TOKEN)

X64_VALUES = ("x64", "64")
X32_VALUES = ("x32", "32")

# Token placed before the entry artifact path in the child invocation
ENTRY_ARTIFACT_FLAG = "-jar"

# -----------------------------------------------------------------------------
# INSTALLATION LAYOUT
# -----------------------------------------------------------------------------

# Executable location inside a JRE root
RUNTIME_EXECUTABLE = os.path.join("bin", "java.exe" if os.name == "nt" else "java")

DEFAULT_ADDITIONAL_ARGUMENTS: List[str] = ["-Dprism.vsync=false"]
DEFAULT_JRE32_PATH = os.path.join("runtime", "x32")
DEFAULT_JRE64_PATH = os.path.join("runtime", "x64")
DEFAULT_WORKING_DIRECTORY = "bin"
DEFAULT_LAUNCHER_JAR = os.path.join("bin", "I-Series-Launcher.jar")

# Files shipped alongside the launcher. Directories map to nested dicts,
# files map to None.
DEFAULT_CORE_FILES: Dict[str, Any] = {
    f"{APP_NAME} Licence.txt": None,
    f"{APP_NAME} Acknowledgements.txt": None,
    "bin": {
        "I-Series-App.jar": None,
        "I-Series-Launcher.jar": None,
        "I-Series-Updater.jar": None,
    },
}
