import sys
from typing import Optional, TextIO

from PySide6.QtWidgets import QApplication, QStyle, QSystemTrayIcon

from ..errors import ConfigError, NotificationError

TITLE = "Pomodoro finished!"
BODY = "Your pomodoro has finished."


class TrayNotifier:
    """Desktop balloon through the system tray, plus the platform beep.

    Needs a running QApplication.
    """

    def __init__(self, timeout_ms: int = 5000):
        self.timeout_ms = timeout_ms
        self._tray = None

    def notify(self, title: str, body: str):
        app = QApplication.instance()
        if not isinstance(app, QApplication):
            raise NotificationError("unable to notify: no display for the system tray (try POMODORO_NOTIFIER=bell)")
        if not QSystemTrayIcon.isSystemTrayAvailable():
            raise NotificationError("unable to notify: no system tray available (try POMODORO_NOTIFIER=bell)")
        self._tray = QSystemTrayIcon(app.style().standardIcon(QStyle.StandardPixmap.SP_MessageBoxInformation))
        self._tray.show()
        self._tray.showMessage(title, body, QSystemTrayIcon.MessageIcon.Information, self.timeout_ms)
        QApplication.beep()


class BellNotifier:
    """Terminal bell and a line of text, for sessions without a tray."""

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out or sys.stdout

    def notify(self, title: str, body: str):
        try:
            self.out.write(f"\a{title} {body}\n")
            self.out.flush()
        except OSError as e:
            raise NotificationError(f"unable to notify: {e}") from e


class NullNotifier:
    def notify(self, title: str, body: str):
        pass


def make_notifier(name: str):
    if name == "tray":
        return TrayNotifier()
    if name == "bell":
        return BellNotifier()
    if name == "none":
        return NullNotifier()
    raise ConfigError(f"unknown notifier {name!r}")
