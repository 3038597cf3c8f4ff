from __future__ import annotations

"""
Configuration Domain Management.

Provides the built-in launcher configuration and the optional JSON
override file ('launcher.json') that an installation may ship next to
the launcher. Only known keys are taken from the file; anything missing
or unreadable falls back to the defaults.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from iseries_launcher.domain import constants as const

logger = logging.getLogger(__name__)

# Keys accepted from the override file
CONFIG_KEYS = (
    "additional_arguments",
    "jre32_path",
    "jre64_path",
    "working_directory",
    "launcher_jar",
    "core_files",
    "log_level",
    "log_to_file",
    "show_dialogs",
    "locale",
)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the built-in launcher configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Child process invocation
        "additional_arguments": list(const.DEFAULT_ADDITIONAL_ARGUMENTS),
        "jre32_path": const.DEFAULT_JRE32_PATH,
        "jre64_path": const.DEFAULT_JRE64_PATH,
        "working_directory": const.DEFAULT_WORKING_DIRECTORY,
        "launcher_jar": const.DEFAULT_LAUNCHER_JAR,

        # Installation verification
        "core_files": copy.deepcopy(const.DEFAULT_CORE_FILES),

        # Diagnostics & presentation
        "log_level": "INFO",
        "log_to_file": True,
        "show_dialogs": True,
        "locale": "en",
    }


def get_config_path(launch_dir: str) -> str:
    """Location of the override file for a given launch directory."""
    return os.path.join(launch_dir, const.CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the launcher configuration, merging the override file if present.

    Args:
        path: Override file path. Defaults are returned when None.

    Returns:
        Dict[str, Any]: The merged (not yet validated) configuration.
    """
    config = get_default_config()

    if not path or not os.path.exists(path):
        logger.debug("Launcher config file not found. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load launcher config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted launcher config file. Using defaults.")
        return config

    unknown = sorted(k for k in data if k not in CONFIG_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown launcher config keys: {', '.join(unknown)}")

    for key in CONFIG_KEYS:
        if key in data and data[key] is not None:
            config[key] = data[key]

    logger.debug(f"Launcher configuration loaded from {path}")
    return config
