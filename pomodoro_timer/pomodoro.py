import logging
import sys
import time
from datetime import datetime
from typing import Callable, Optional, TextIO, Tuple

from PySide6.QtCore import QObject, QTimer, Signal

from .errors import PomodoroError
from .models import PersistedState, RunResult, TimerConfig
from .ui.formatting import clock, humanize_duration, long_date, short_duration
from .ui.notifier import BODY, TITLE

logger = logging.getLogger(__name__)

NEW_SYMBOL = "🍅"
CONTINUED_SYMBOL = "🍏"


def select_duration(config: TimerConfig, saved: PersistedState) -> Tuple[int, bool]:
    """Return (seconds, continued) for this run.

    Saved time wins unless a restart is forced; otherwise a positive request
    is minutes and anything else is a literal number of seconds.
    """
    if saved.seconds_remaining > 0 and not config.force_restart:
        return saved.seconds_remaining, True
    if config.requested_minutes > 0:
        return config.requested_minutes * 60, False
    return abs(config.requested_minutes), False


class PomodoroController(QObject):
    """One countdown, from duration choice to the final save.

    Signals:
    - started(int, bool): effective seconds and whether a saved run is continued
    - tick(int): emitted every tick with whole seconds elapsed
    - finished(object): RunResult, once the state has been saved
    - failed(object): the PomodoroError that ended the run
    """

    started = Signal(int, bool)
    tick = Signal(int)
    finished = Signal(object)
    failed = Signal(object)

    def __init__(self, config: TimerConfig, store, interrupted, notifier, progress=None,
                 out: Optional[TextIO] = None, clock_fn: Callable[[], float] = time.monotonic,
                 now: Callable[[], datetime] = datetime.now, log: Optional[logging.Logger] = None,
                 tick_interval_ms: int = 1000, parent=None):
        super().__init__(parent)
        self.config = config
        self.store = store
        self.interrupted = interrupted
        self.notifier = notifier
        self.progress = progress
        self.out = out or sys.stdout
        self.log = log or logger
        self._clock = clock_fn
        self._now = now

        self.effective_seconds = 0
        self.continued = False
        self.result: Optional[RunResult] = None
        self.error: Optional[PomodoroError] = None
        self._started_at = 0.0
        self._running = False
        self._timer = QTimer(self)
        self._timer.setInterval(tick_interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    def start(self) -> int:
        try:
            self._begin()
        except Exception as e:
            self._fail(e)
        return self.effective_seconds

    def _begin(self):
        saved = self.store.load()
        self.effective_seconds, self.continued = select_duration(self.config, saved)
        symbol = CONTINUED_SYMBOL if self.continued else NEW_SYMBOL

        self.log.info(
            f"{symbol} {'Continuing' if self.continued else 'Starting new'} "
            f"{short_duration(self.effective_seconds)} Pomodoro on {long_date(self._now())}"
        )
        if self.progress is not None:
            self.progress.begin(self.effective_seconds, symbol)

        self._started_at = self._clock()
        self._running = True
        self.started.emit(self.effective_seconds, self.continued)
        if self.effective_seconds <= 0:
            self._stop(interrupted=False)
        else:
            self._timer.start()

    def is_active(self) -> bool:
        return self._running

    def elapsed(self) -> float:
        if not self._running:
            return 0.0
        return max(0.0, self._clock() - self._started_at)

    def remaining(self) -> int:
        return max(0, self.effective_seconds - int(self.elapsed()))

    def _on_timeout(self):
        if not self._running:
            return
        try:
            self._advance()
        except Exception as e:
            self._fail(e)

    def _advance(self):
        elapsed = self.elapsed()
        if self.progress is not None:
            self.progress.advance(max(0, self.effective_seconds - int(elapsed)))
        self.tick.emit(int(elapsed))
        if self.interrupted.is_set():
            self._stop(interrupted=True, elapsed=elapsed)
        elif elapsed >= self.effective_seconds:
            self._stop(interrupted=False, elapsed=elapsed)

    def _stop(self, interrupted: bool, elapsed: float = 0.0):
        remaining = max(0, self.effective_seconds - int(elapsed)) if interrupted else 0
        self._timer.stop()
        self._running = False
        if self.progress is not None:
            self.progress.close()

        ended_at = self._now()
        if interrupted:
            self._info_and_print(f"Interrupted at {clock(ended_at)} with {humanize_duration(remaining)} remaining.")
        else:
            self._info_and_print(f"Finished at {clock(ended_at)}")

        self.store.save(remaining)
        if not interrupted:
            self.notifier.notify(TITLE, BODY)

        self.result = RunResult(
            completed_naturally=not interrupted,
            remaining_seconds=remaining,
            effective_seconds=self.effective_seconds,
            continued=self.continued,
            ended_at=ended_at,
        )
        self.finished.emit(self.result)

    def _fail(self, error: Exception):
        """End the run with a PomodoroError so the event loop always quits."""
        self._timer.stop()
        self._running = False
        if not isinstance(error, PomodoroError):
            wrapped = PomodoroError(f"unexpected {type(error).__name__}: {error}")
            wrapped.__cause__ = error
            error = wrapped
        self.log.error(str(error))
        self.error = error
        self.failed.emit(error)

    def _info_and_print(self, msg: str):
        self.log.info(msg)
        self.out.write(msg + "\n")
        self.out.flush()
