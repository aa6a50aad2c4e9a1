from datetime import datetime

_UNITS = (("hour", "h", 3600), ("minute", "m", 60), ("second", "s", 1))


def _split(seconds: int):
    seconds = max(0, int(seconds))
    parts = []
    for long_name, short_name, size in _UNITS:
        n, seconds = divmod(seconds, size)
        if n:
            parts.append((n, long_name, short_name))
    return parts


def format_time(seconds: int) -> str:
    """Seconds -> HH:MM:SS"""
    seconds = max(0, int(seconds))
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def short_duration(seconds: int) -> str:
    """1490 -> '24m 50s'"""
    parts = _split(seconds)
    if not parts:
        return "0s"
    return " ".join(f"{n}{short}" for n, _, short in parts)


def humanize_duration(seconds: int) -> str:
    """1490 -> '24 minutes 50 seconds'"""
    parts = _split(seconds)
    if not parts:
        return "0 seconds"
    return " ".join(f"{n} {name}" if n == 1 else f"{n} {name}s" for n, name, _ in parts)


def clock(moment: datetime) -> str:
    return moment.strftime("%H:%M:%S")


def long_date(moment: datetime) -> str:
    return moment.strftime("%A, %d-%b-%Y at %H:%M:%S")
