from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between the raw launcher configuration and the immutable
settings objects. Coerces values into the expected types and replaces
anything unusable with its default, collecting a warning per fix.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from iseries_launcher.domain.config import get_default_config
from iseries_launcher.domain.file_structure import is_structure_mapping
from iseries_launcher.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(config: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a launcher configuration dictionary.

    Args:
        config: Raw configuration data (usually from load_config).

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    path_fields = ["jre32_path", "jre64_path", "working_directory", "launcher_jar"]
    bool_fields = ["log_to_file", "show_dialogs"]

    for field in path_fields:
        merged[field] = _as_relative_path(merged.get(field), defaults[field], field, warnings)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings)

    merged["additional_arguments"] = _as_list_str(
        merged.get("additional_arguments"), defaults["additional_arguments"],
        "additional_arguments", warnings
    )

    if not is_structure_mapping(merged.get("core_files")):
        warnings.append("Invalid field 'core_files': expected nested mapping of names. Using fallback.")
        merged["core_files"] = defaults["core_files"]

    level = merged.get("log_level")
    if not isinstance(level, str) or level.strip().upper() not in _LEVEL_MAP:
        warnings.append(f"Invalid field 'log_level': {level!r}. Using fallback.")
        merged["log_level"] = defaults["log_level"]
    else:
        merged["log_level"] = level.strip().upper()

    locale = merged.get("locale")
    if not isinstance(locale, str) or not locale.strip():
        warnings.append(f"Invalid field 'locale': {locale!r}. Using fallback.")
        merged["locale"] = defaults["locale"]

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_relative_path(value: Any, fallback: str, field: str, warnings: List[str]) -> str:
    """
    Accept a relative path string, normalizing leading separators.

    Paths written for the original launcher (e.g. '\\runtime\\x64\\') are
    accepted: separators are unified and the leading/trailing ones dropped.
    """
    if value is None:
        return fallback
    if not isinstance(value, str):
        warnings.append(
            f"Invalid field '{field}': expected str, received {type(value).__name__}. Using fallback."
        )
        return fallback

    parts = [p for p in value.replace("\\", "/").split("/") if p]
    if not parts:
        return fallback
    return os.path.join(*parts)


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str]) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if isinstance(value, (int, float)) and value in (0, 1):
        warnings.append(f"Field '{field}' converted from number {value} to bool.")
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("true", "1", "yes", "y"):
            warnings.append(f"Field '{field}' converted from '{value}' to True.")
            return True
        if s in ("false", "0", "no", "n"):
            warnings.append(f"Field '{field}' converted from '{value}' to False.")
            return False

    warnings.append(f"Invalid field '{field}': expected bool, received {type(value).__name__}. Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str]) -> List[str]:
    """
    Ensure input is a list of strings.

    Items are kept exactly as written, surrounding spaces included.
    Only non-string items are discarded.
    """
    if value is None:
        return list(fallback)

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                out.append(item)
            else:
                warnings.append(f"Invalid item in '{field}[{i}]': expected str. Item discarded.")
        return out

    warnings.append(
        f"Invalid field '{field}': expected list[str], received {type(value).__name__}. Using fallback."
    )
    return list(fallback)
