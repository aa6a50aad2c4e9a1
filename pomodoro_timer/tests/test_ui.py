import io

import pytest
from rich.console import Console

from pomodoro_timer.errors import ConfigError, NotificationError
from pomodoro_timer.ui.notifier import (
    BODY, TITLE, BellNotifier, NullNotifier, TrayNotifier, make_notifier,
)
from pomodoro_timer.ui.progress import ProgressView


def test_bell_notifier_writes_message():
    out = io.StringIO()
    BellNotifier(out).notify(TITLE, BODY)
    assert out.getvalue() == "\aPomodoro finished! Your pomodoro has finished.\n"


def test_make_notifier():
    assert isinstance(make_notifier("tray"), TrayNotifier)
    assert isinstance(make_notifier("bell"), BellNotifier)
    assert isinstance(make_notifier("none"), NullNotifier)
    with pytest.raises(ConfigError):
        make_notifier("carrier-pigeon")


def test_tray_notifier_needs_widgets_app():
    # the test session runs a plain QCoreApplication
    with pytest.raises(NotificationError):
        TrayNotifier().notify(TITLE, BODY)


def test_progress_view_lifecycle():
    view = ProgressView(Console(file=io.StringIO(), force_terminal=False))
    view.begin(3, "🍅")
    view.advance(2)
    view.advance(1)
    view.close()
    # after close the view ignores further ticks
    view.advance(0)
    view.close()
