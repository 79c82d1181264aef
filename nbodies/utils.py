"""Formatting of simulated time for the window caption and log lines."""

# Largest unit first; each entry is (seconds per unit, suffix).
_TIME_UNITS = (
    (365.0 * 86400.0, "yr"),
    (86400.0, "d"),
    (3600.0, "h"),
    (60.0, "min"),
)


def format_elapsed(seconds: float) -> str:
    """Render a simulated duration with the largest unit that fits.

    Negative or non-finite durations are shown as-is in seconds, since they
    only appear when a run was configured to do nothing.
    """
    if not seconds >= 0 or seconds == float("inf"):
        return f"{seconds} s"
    for size, suffix in _TIME_UNITS:
        if seconds >= size:
            return f"{seconds / size:.2f} {suffix}"
    return f"{seconds:.2f} s"


def frame_caption(elapsed: float, steps: int) -> str:
    """Window caption showing simulated time and the number of steps taken."""
    return f"N-Body Simulation - t = {format_elapsed(elapsed)}, step {steps}"
