"""Compact, single-unit rendering of elapsed time."""

from __future__ import annotations

from datetime import timedelta

_YEAR = 31_557_600  # 365.25 days
_MONTH = 2_630_016  # 30.44 days
_DAY = 86_400
_HOUR = 3_600
_MINUTE = 60


def format_duration(duration: timedelta) -> str:
    """Render only the most significant unit of ``duration``, e.g. ``3h`` or ``250ms``.

    Durations below one millisecond render as ``0s``. Negative durations
    are rejected with ``ValueError``.
    """
    if duration < timedelta(0):
        raise ValueError("duration must not be negative")

    total_us = duration // timedelta(microseconds=1)
    secs, micros = divmod(total_us, 1_000_000)

    years, year_rest = divmod(secs, _YEAR)
    months, month_rest = divmod(year_rest, _MONTH)
    days, day_secs = divmod(month_rest, _DAY)
    hours = day_secs // _HOUR
    minutes = day_secs % _HOUR // _MINUTE
    seconds = day_secs % _MINUTE
    millis = micros // 1_000

    segments = (
        ("y", years),
        ("mo", months),
        ("d", days),
        ("h", hours),
        ("m", minutes),
        ("s", seconds),
        ("ms", millis),
    )
    for unit, value in segments:
        if value > 0:
            return f"{value}{unit}"
    return "0s"