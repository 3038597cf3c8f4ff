from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the read-only filesystem checks used by the launcher and the
resolution of the launch and user data directories. Existence checks
never raise: any OS-level failure counts as "not found".
"""

import logging
import os
import sys

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "I-Series"
UNIX_APP_DIR_NAME = ".iseries"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_launch_dir() -> str:
    """
    Resolve the directory the launcher operates from.

    A frozen launcher uses the folder containing its executable so that
    shortcuts with a different 'Start in' folder still find the install.
    Otherwise the current working directory is used.

    Returns:
        str: Absolute path of the launch directory.
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(os.path.abspath(sys.executable))
    return os.path.abspath(os.getcwd())


def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent launcher data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/I-Series
    - Linux/Mac: ~/.iseries

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data dir '{path}': {e}")

    return os.path.abspath(path)


def join_relative(base_dir: str, relative: str) -> str:
    """
    Append a configured relative path to a base directory.

    Leading separators in the relative part are ignored so that values
    such as '/bin' or '\\bin' stay inside the base directory.
    """
    rel = relative.replace("\\", "/").lstrip("/")
    if not rel:
        return base_dir
    return os.path.normpath(os.path.join(base_dir, *rel.split("/")))

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def file_exists(path: str) -> bool:
    """
    Point-in-time check that a regular file exists at the given path.

    Permission errors, invalid names and broken links all report False.

    Args:
        path: Absolute path to check.

    Returns:
        bool: True only if a file is present and accessible.
    """
    try:
        return os.path.isfile(path)
    except (OSError, ValueError):
        return False
