from __future__ import annotations

"""
User Notification Collaborators.

Interface through which the launch sequence tells the user about
warnings (missing core files, x32 runtime on an x64 host) and fatal
problems (no usable runtime). Each notification is blocking: the call
returns once the user has been told.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import TextIO

from iseries_launcher.utils.i18n import i18n

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Abstract sink for user-facing launcher messages."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Report a non-fatal problem."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Report a fatal problem, before the launcher exits."""


class ConsoleNotifier(Notifier):
    """Writes notifications to a text stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def warn(self, message: str) -> None:
        self._write("WARNING", message)

    def error(self, message: str) -> None:
        self._write("ERROR", message)

    def _write(self, prefix: str, message: str) -> None:
        stream = self._stream or sys.stderr
        print(f"{prefix}: {message}", file=stream)


class DialogNotifier(Notifier):
    """
    Shows each notification in a blocking modal window.

    When no window can be shown (headless session, missing Tk) the
    message goes to the console notifier instead, and dialogs stay
    disabled for the rest of the run.
    """

    def __init__(self, fallback: Notifier | None = None) -> None:
        self._fallback = fallback or ConsoleNotifier()
        self._available = True

    def warn(self, message: str) -> None:
        self._show(i18n.t("launcher.titles.warning"), message, "warning")

    def error(self, message: str) -> None:
        self._show(i18n.t("launcher.titles.error"), message, "error")

    def _show(self, title: str, message: str, level: str) -> None:
        if self._available:
            try:
                from iseries_launcher.interface.gui.dialogs.alert_modal import show_alert
                show_alert(title, message, level)
                return
            except Exception as e:
                logger.error(f"Alert dialog failed: {e}. Falling back to console.")
                self._available = False

        if level == "error":
            self._fallback.error(message)
        else:
            self._fallback.warn(message)


def create_notifier(show_dialogs: bool) -> Notifier:
    """Pick the notifier matching the 'show_dialogs' configuration."""
    return DialogNotifier() if show_dialogs else ConsoleNotifier()
