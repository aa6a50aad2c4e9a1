from datetime import datetime

from pomodoro_timer.ui.formatting import clock, format_time, humanize_duration, long_date, short_duration


def test_format_time():
    assert format_time(0) == "00:00:00"
    assert format_time(1490) == "00:24:50"
    assert format_time(3725) == "01:02:05"
    assert format_time(-5) == "00:00:00"


def test_short_duration():
    assert short_duration(1500) == "25m"
    assert short_duration(1490) == "24m 50s"
    assert short_duration(3601) == "1h 1s"
    assert short_duration(0) == "0s"


def test_humanize_duration():
    assert humanize_duration(1490) == "24 minutes 50 seconds"
    assert humanize_duration(61) == "1 minute 1 second"
    assert humanize_duration(7200) == "2 hours"
    assert humanize_duration(0) == "0 seconds"


def test_clock_and_date():
    moment = datetime(2024, 3, 4, 9, 5, 7)
    assert clock(moment) == "09:05:07"
    assert long_date(moment) == "Monday, 04-Mar-2024 at 09:05:07"
