import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from pydantic import ValidationError
from PySide6.QtCore import QLockFile

from .errors import AlreadyRunningError, StateWriteError
from .models import PersistedState

logger = logging.getLogger(__name__)

DEFAULT_STATE_FILE = ".pomodoro_state"


class StateStore:
    """JSON file holding the seconds left on an interrupted pomodoro.

    Reading is best-effort: a missing or damaged file means there is
    nothing to resume. Writing is not: a failed save raises StateWriteError.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_STATE_FILE):
        self.path = Path(path)

    def load(self) -> PersistedState:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"No saved state at {self.path}: {e}")
            return PersistedState()
        try:
            return PersistedState.model_validate_json(raw)
        except ValidationError as e:
            logger.debug(f"Ignoring unreadable state in {self.path}: {e.error_count()} error(s)")
            return PersistedState()

    def save(self, seconds_remaining: int) -> None:
        state = PersistedState(seconds_remaining=max(0, int(seconds_remaining)))
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(state.model_dump_json(), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise StateWriteError(f"cannot write state file {self.path}: {e}") from e
        logger.debug(f"Saved {state.seconds_remaining}s remaining to {self.path}")

    @contextmanager
    def lock(self) -> Iterator[None]:
        """Hold an exclusive lock on the state file for one run."""
        lock_file = QLockFile(str(self.path) + ".lock")
        # runs last longer than Qt's 30s default; only a dead owner makes it stale
        lock_file.setStaleLockTime(0)
        if not lock_file.tryLock(0):
            if lock_file.error() == QLockFile.LockError.LockFailedError:
                raise AlreadyRunningError(f"another pomodoro is already running here ({self.path}.lock)")
            raise StateWriteError(f"cannot create lock file {self.path}.lock")
        try:
            yield
        finally:
            lock_file.unlock()
