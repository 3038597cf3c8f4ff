from __future__ import annotations

"""
Unit tests for the Process Spawning Infrastructure.

subprocess.Popen is mocked so no real process is started; the tests
check the invocation and the console handling options.
"""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from iseries_launcher.domain.launch_models import LaunchDescriptor
from iseries_launcher.infra.process import ProcessSpawner, _popen_kwargs, format_command


def _descriptor(with_shell: bool = False) -> LaunchDescriptor:
    return LaunchDescriptor(
        executable="/opt/app/runtime/x64/bin/java",
        working_directory="/opt/app/bin",
        arguments=("-jar", "/opt/app/bin/app.jar", "x"),
        with_shell=with_shell,
    )


def test_spawn_invokes_popen() -> None:
    """TC-01: Verify command, working directory and reported PID."""
    with patch("iseries_launcher.infra.process.subprocess.Popen") as mock_popen:
        mock_popen.return_value = MagicMock(pid=4242)

        spawned = ProcessSpawner().spawn(_descriptor())

    args, kwargs = mock_popen.call_args
    assert args[0] == ["/opt/app/runtime/x64/bin/java", "-jar", "/opt/app/bin/app.jar", "x"]
    assert kwargs["cwd"] == "/opt/app/bin"
    assert spawned.pid == 4242
    assert spawned.command == args[0]


def test_spawn_propagates_os_error() -> None:
    """TC-02: Verify start failures surface as OSError."""
    with patch("iseries_launcher.infra.process.subprocess.Popen", side_effect=FileNotFoundError("java")):
        with pytest.raises(OSError):
            ProcessSpawner().spawn(_descriptor())


def test_popen_kwargs_without_shell_posix() -> None:
    """TC-03: Verify a windowless child has its streams discarded."""
    with patch("os.name", "posix"):
        kwargs = _popen_kwargs(False)

    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["stdin"] is subprocess.DEVNULL
    assert "creationflags" not in kwargs


def test_popen_kwargs_with_shell_posix() -> None:
    """TC-04: Verify a shell child inherits the terminal."""
    with patch("os.name", "posix"):
        kwargs = _popen_kwargs(True)

    assert "stdout" not in kwargs
    assert kwargs["close_fds"] is True


def test_popen_kwargs_windows_flags() -> None:
    """TC-05: Verify console creation flags on Windows."""
    with patch("os.name", "nt"):
        with patch.object(subprocess, "CREATE_NEW_CONSOLE", 0x10, create=True):
            with patch.object(subprocess, "CREATE_NO_WINDOW", 0x08000000, create=True):
                assert _popen_kwargs(True)["creationflags"] == 0x10
                assert _popen_kwargs(False)["creationflags"] == 0x08000000


def test_format_command_quotes_spaces() -> None:
    """TC-06: Verify arguments with spaces stay a single token."""
    line = format_command(["java", "-jar", "My App.jar"])
    assert "java -jar" in line
    assert "My App.jar" in line
    assert line != "java -jar My App.jar"
