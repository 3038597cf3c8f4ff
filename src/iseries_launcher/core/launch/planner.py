from __future__ import annotations

"""
Launch Planner.

Assembles the final child process invocation from the runtime settings,
the resolved runtime executable and the filtered user arguments. Nothing
is started here; the descriptor is handed to the process spawner.
"""

import logging
from typing import List, Sequence

from iseries_launcher.domain.constants import ENTRY_ARTIFACT_FLAG
from iseries_launcher.domain.launch_models import LaunchDescriptor
from iseries_launcher.domain.settings import RuntimeSettings
from iseries_launcher.infra.fs import join_relative

logger = logging.getLogger(__name__)


def build_arguments(
        settings: RuntimeSettings,
        artifact_path: str,
        user_args: Sequence[str],
) -> List[str]:
    """
    Order the child arguments: fixed args, entry jar, then user args.

    Args:
        settings: Provides the fixed additional arguments.
        artifact_path: Resolved path of the jar to execute.
        user_args: Already filtered user arguments.

    Returns:
        List[str]: The argument list, never reordered.
    """
    arguments: List[str] = list(settings.additional_arguments)
    arguments += [ENTRY_ARTIFACT_FLAG, artifact_path]
    if user_args:
        arguments += list(user_args)
    return arguments


def build_launch_descriptor(
        settings: RuntimeSettings,
        executable: str,
        start_dir: str,
        user_args: Sequence[str],
        with_shell: bool = False,
) -> LaunchDescriptor:
    """
    Compose the process invocation for the chosen runtime.

    Args:
        settings: Immutable launcher settings.
        executable: Path of the resolved runtime's java executable.
        start_dir: Directory the launcher was started from.
        user_args: Filtered user arguments to forward.
        with_shell: Whether the child gets a visible console window.

    Returns:
        LaunchDescriptor: The invocation for the process spawner.
    """
    working_directory = join_relative(start_dir, settings.working_directory)
    artifact_path = join_relative(start_dir, settings.launcher_jar)

    descriptor = LaunchDescriptor(
        executable=executable,
        working_directory=working_directory,
        arguments=tuple(build_arguments(settings, artifact_path, user_args)),
        with_shell=with_shell,
    )
    logger.debug(f"Planned launch: {descriptor}")
    return descriptor
