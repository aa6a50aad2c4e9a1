import argparse
import logging
import os
import sys
from typing import List, Optional

from PySide6.QtCore import QCoreApplication, QTimer
from PySide6.QtWidgets import QApplication

from .config import Settings, load_settings
from .errors import ConfigError, PomodoroError
from .interrupt import InterruptFlag, install_interrupt_handler, restore_handlers
from .models import TimerConfig
from .pomodoro import PomodoroController
from .repository import StateStore
from .ui.notifier import make_notifier
from .ui.progress import ProgressView

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "pomodoro_timer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
# keeps the tray balloon alive long enough to be shown
NOTIFY_LINGER_MS = 1500


def parse_args(argv: Optional[List[str]] = None) -> TimerConfig:
    parser = argparse.ArgumentParser(prog="pomodoro", description="A pomodoro timer that remembers where you stopped.")
    parser.add_argument("-d", "--duration", type=int, default=25,
                        help="duration in minutes, defaults to 25; zero or negative means that many seconds")
    parser.add_argument("-r", "--restart", action="store_true", help="restart a new pomodoro, ignoring a saved one")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)
    return TimerConfig(requested_minutes=args.duration, force_restart=args.restart)


def configure_logging(settings: Settings) -> logging.Handler:
    """Append package log records to the log file; returns the handler to remove at exit."""
    try:
        handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot open log file {settings.log_file}: {e}") from e
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(settings.log_level)
    pkg_logger.addHandler(handler)
    return handler


def has_gui_platform(environ=None, platform: str = sys.platform) -> bool:
    """Whether QApplication can open a platform plugin here.

    On X11/Wayland systems Qt aborts the process when no display is reachable.
    """
    environ = os.environ if environ is None else environ
    if platform.startswith(("win", "darwin")):
        return True
    return any(environ.get(name) for name in ("QT_QPA_PLATFORM", "DISPLAY", "WAYLAND_DISPLAY"))


def _qt_app(settings: Settings) -> QCoreApplication:
    app = QCoreApplication.instance()
    if app is not None:
        return app
    # the tray balloon needs the widgets flavour; without a display the
    # tray notifier reports the failure when the pomodoro completes
    if settings.notifier == "tray" and has_gui_platform():
        return QApplication(sys.argv[:1])
    return QCoreApplication(sys.argv[:1])


def run(config: TimerConfig, settings: Settings) -> int:
    app = _qt_app(settings)
    interrupted = InterruptFlag()
    previous = install_interrupt_handler(interrupted)
    try:
        store = StateStore(settings.state_file)
        with store.lock():
            controller = PomodoroController(
                config, store, interrupted, make_notifier(settings.notifier), progress=ProgressView(),
            )
            linger_ms = NOTIFY_LINGER_MS if settings.notifier == "tray" else 0
            controller.finished.connect(
                lambda result: QTimer.singleShot(linger_ms if result.completed_naturally else 0, app.quit)
            )
            controller.failed.connect(lambda error: app.quit())
            QTimer.singleShot(0, controller.start)
            app.exec()
            if controller.error is not None:
                raise controller.error
    finally:
        restore_handlers(previous)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    handler = None
    try:
        settings = load_settings()
        handler = configure_logging(settings)
        return run(config, settings)
    except PomodoroError as e:
        if handler is not None:
            logger.error(f"Pomodoro aborted: {e}")
        sys.stderr.write(f"pomodoro: {e}\n")
        return 1
    finally:
        if handler is not None:
            logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
            handler.close()


if __name__ == "__main__":
    sys.exit(main())
