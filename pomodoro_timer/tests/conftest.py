import pytest
from PySide6.QtCore import QCoreApplication


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.t = start

    def __call__(self):
        return self.t

    def advance(self, seconds: float = 1.0):
        self.t += seconds


class RecordingNotifier:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def notify(self, title, body):
        if self.error is not None:
            raise self.error
        self.calls.append((title, body))


class RecordingProgress:
    def __init__(self):
        self.begun = None
        self.remaining = []
        self.closed = 0

    def begin(self, total, symbol):
        self.begun = (total, symbol)

    def advance(self, remaining):
        self.remaining.append(remaining)

    def close(self):
        self.closed += 1


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so anything load_dotenv writes is undone afterwards
    for name in ("POMODORO_STATE_FILE", "POMODORO_LOG_FILE", "POMODORO_NOTIFIER", "POMODORO_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
