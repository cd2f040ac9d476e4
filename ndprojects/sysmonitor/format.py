"""Formatting helpers for the system monitor."""

import math


def elapsed_time(seconds: int) -> str:
    """Format a number of seconds as ``HH:MM:SS``.

    Hours are not wrapped, so values above 99 hours produce more than two
    hour digits.
    """
    hours_fraction, hours = math.modf(seconds / 3600.0)
    minutes_fraction, minutes = math.modf(hours_fraction * 60)
    _, secs = math.modf(minutes_fraction * 60)
    return f"{int(hours):02d}:{int(minutes):02d}:{int(secs):02d}"