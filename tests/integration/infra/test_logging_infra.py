from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, and log file rotation logic.
"""

import logging
import time
from logging.handlers import QueueListener
from pathlib import Path
from unittest.mock import patch

import pytest

from iseries_launcher.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_default_log_path,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up launcher handlers before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()

        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()

        setattr(root, _CONFIGURED_FLAG_ATTR, False)
        root.setLevel(logging.WARNING)

    _reset()
    yield
    _reset()


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial_handler_count = len(_our_handlers())

    configure_logging(cfg)
    assert len(_our_handlers()) == initial_handler_count == 1, "Handlers were duplicated."


def test_force_reconfiguration() -> None:
    """TC-02: Verify 'force' replaces the listener instead of stacking one."""
    configure_logging(LoggingConfig(level="INFO"))
    first = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)
    root = logging.getLogger()

    assert getattr(root, _QUEUE_LISTENER_ATTR) is not first
    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-03: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "logs" / "launcher.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Give time for the QueueListener to process
    time.sleep(0.5)

    backup_file = tmp_path / "logs" / "launcher.log.1"
    assert log_file.exists()
    assert backup_file.exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-04: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()

    assert len(_our_handlers()) > 0
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True
    assert isinstance(getattr(root, _QUEUE_LISTENER_ATTR), QueueListener)


def test_unknown_level_defaults_to_info() -> None:
    """TC-05: Verify an unrecognised level name does not break configuration."""
    configure_logging(LoggingConfig(level="CHATTY"))
    assert logging.getLogger().level == logging.INFO


def test_unwritable_log_file_is_tolerated(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """TC-06: Verify a log file that cannot be opened only produces a warning."""
    with patch("os.makedirs", side_effect=OSError("read-only")):
        configure_logging(LoggingConfig(console=False, log_file=str(tmp_path / "x" / "l.log")))

    assert "Launcher log file unavailable" in capsys.readouterr().err
    assert _our_handlers() == []


def test_default_log_path(tmp_path: Path) -> None:
    """TC-07: Verify the log file lives under the user data directory."""
    with patch("iseries_launcher.infra.logging.core.get_user_data_dir", return_value=str(tmp_path)):
        path = get_default_log_path()

    assert path == str(tmp_path / "logs" / "launcher.log")


def test_reconfigured_follows_launcher_settings(tmp_path: Path) -> None:
    """TC-08: Verify the bootstrap log file is kept only when file logging is enabled."""
    bootstrap = LoggingConfig(log_file=str(tmp_path / "launcher.log"))

    enabled = bootstrap.reconfigured("DEBUG", True)
    disabled = bootstrap.reconfigured("ERROR", False)

    assert bootstrap.level == "INFO"
    assert enabled.level == "DEBUG"
    assert enabled.log_file == bootstrap.log_file
    assert disabled.level == "ERROR"
    assert disabled.log_file is None
    assert disabled.console is True
