from __future__ import annotations

"""
Process Spawning Infrastructure.

Starts the packaged application from a LaunchDescriptor and reports the
identity of the new process. The launcher does not wait for the child,
forward its output or propagate its exit code.
"""

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List

from iseries_launcher.domain.launch_models import LaunchDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpawnedProcess:
    """
    Identity of a started child process, kept for diagnostics.

    Attributes:
        pid: Operating system process identifier.
        start_time: Local time the process was started.
        command: Executable and arguments the process was started with.
    """
    pid: int
    start_time: datetime
    command: List[str]


class ProcessSpawner:
    """Creates the child process described by a LaunchDescriptor."""

    def spawn(self, descriptor: LaunchDescriptor) -> SpawnedProcess:
        """
        Start the configured application process.

        Args:
            descriptor: Executable, working directory, arguments and
                        console visibility of the child.

        Returns:
            SpawnedProcess: PID and start time of the new process.

        Raises:
            OSError: If the executable cannot be started.
        """
        command = descriptor.command

        logger.info("Launching application...")
        logger.info(f"Working directory: {descriptor.working_directory}")
        logger.info(f"Launch command: {format_command(command)}")

        proc = subprocess.Popen(
            command,
            cwd=descriptor.working_directory,
            **_popen_kwargs(descriptor.with_shell),
        )
        spawned = SpawnedProcess(pid=proc.pid, start_time=datetime.now(), command=command)

        logger.info(f"Process ID: {spawned.pid}")
        logger.info(f"Start time: {spawned.start_time.isoformat(sep=' ', timespec='seconds')}")
        return spawned


def format_command(command: List[str]) -> str:
    """Render a command list as a single copy-pasteable line."""
    if os.name == "nt":
        return subprocess.list2cmdline(command)
    return shlex.join(command)


def _popen_kwargs(with_shell: bool) -> Dict[str, Any]:
    """
    Console handling for the child process.

    With a shell the child gets its own console window on Windows and
    inherits the terminal elsewhere. Without one it runs windowless and
    its standard streams are discarded.
    """
    kwargs: Dict[str, Any] = {"close_fds": True}

    if os.name == "nt":
        flag_name = "CREATE_NEW_CONSOLE" if with_shell else "CREATE_NO_WINDOW"
        kwargs["creationflags"] = int(getattr(subprocess, flag_name, 0))

    if not with_shell:
        kwargs["stdin"] = subprocess.DEVNULL
        kwargs["stdout"] = subprocess.DEVNULL
        kwargs["stderr"] = subprocess.DEVNULL

    return kwargs
