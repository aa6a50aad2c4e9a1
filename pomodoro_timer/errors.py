class PomodoroError(Exception):
    """Base class for errors that end a run."""


class StateWriteError(PomodoroError):
    pass


class InterruptHandlerError(PomodoroError):
    pass


class NotificationError(PomodoroError):
    pass


class AlreadyRunningError(PomodoroError):
    pass


class ConfigError(PomodoroError):
    pass
