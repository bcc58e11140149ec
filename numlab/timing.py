"""Elapsed-time helper for processor clock tick counts."""

CLOCKS_PER_SEC = 1_000_000
"""Number of processor clock ticks per second (the POSIX value)."""


def diff_clock(start_time: float, end_time: float) -> float:
    """Return the difference ``start_time - end_time`` of two tick counts, scaled.

    The difference in ticks is multiplied by 10 and divided by
    :data:`CLOCKS_PER_SEC`. Callers pass the later time stamp first to get
    a positive result.
    """
    diff_ticks = float(start_time - end_time)
    return diff_ticks * 10 / CLOCKS_PER_SEC