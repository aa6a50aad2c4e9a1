import signal
import threading
from typing import Dict, Iterable, Optional

from .errors import InterruptHandlerError


def _default_signals():
    sigs = [signal.SIGINT]
    if hasattr(signal, "SIGTERM"):
        sigs.append(signal.SIGTERM)
    return sigs


class InterruptFlag:
    """Set once by a signal handler, read once per tick by the countdown."""

    def __init__(self):
        self._event = threading.Event()

    def set(self):
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()


def install_interrupt_handler(flag: InterruptFlag, signals: Optional[Iterable[int]] = None) -> Dict[int, object]:
    """Route the given signals (SIGINT/SIGTERM by default) to `flag`.

    Returns the previous handlers so the caller can put them back with
    restore_handlers().
    """
    def _handler(signum, frame):
        flag.set()

    previous = {}
    try:
        for sig in (signals or _default_signals()):
            previous[sig] = signal.signal(sig, _handler)
    except (ValueError, OSError) as e:
        restore_handlers(previous)
        raise InterruptHandlerError(f"cannot install interrupt handler: {e}") from e
    return previous


def restore_handlers(previous: Dict[int, object]) -> None:
    for sig, handler in previous.items():
        signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
