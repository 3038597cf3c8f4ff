from __future__ import annotations

"""
Runtime Settings Model.

Immutable launch configuration: which arguments the child process always
receives and where the runtimes, working directory and entry jar live
relative to the launch directory.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from iseries_launcher.domain import constants as const


@dataclass(frozen=True)
class RuntimeSettings:
    """
    Constant settings used to build the child process invocation.

    Attributes:
        additional_arguments: Fixed arguments placed first, in order.
        jre32_path: Relative path to the x32bit JRE root.
        jre64_path: Relative path to the x64bit JRE root.
        working_directory: Relative working directory of the child process.
        launcher_jar: Relative path to the jar the child process executes.
    """
    additional_arguments: Tuple[str, ...] = tuple(const.DEFAULT_ADDITIONAL_ARGUMENTS)
    jre32_path: str = const.DEFAULT_JRE32_PATH
    jre64_path: str = const.DEFAULT_JRE64_PATH
    working_directory: str = const.DEFAULT_WORKING_DIRECTORY
    launcher_jar: str = const.DEFAULT_LAUNCHER_JAR


def build_runtime_settings(cfg: Dict[str, Any]) -> RuntimeSettings:
    """
    Create the RuntimeSettings for a validated configuration dictionary.

    Missing keys keep their built-in default.

    Args:
        cfg: Configuration as returned by the config validator.

    Returns:
        RuntimeSettings: The frozen settings instance.
    """
    defaults = RuntimeSettings()
    return RuntimeSettings(
        additional_arguments=tuple(cfg.get("additional_arguments", defaults.additional_arguments)),
        jre32_path=cfg.get("jre32_path", defaults.jre32_path),
        jre64_path=cfg.get("jre64_path", defaults.jre64_path),
        working_directory=cfg.get("working_directory", defaults.working_directory),
        launcher_jar=cfg.get("launcher_jar", defaults.launcher_jar),
    )
