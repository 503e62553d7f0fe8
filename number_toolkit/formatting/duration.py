"""Human readable durations"""

from typing import Union

from number_toolkit.constants import DURATION_UNITS


def duration(seconds: Union[int, float]) -> str:
    """
    Describe a number of seconds with calendar units, largest first.

    Years are 365 days and months 30 days. Fractional seconds are dropped
    and the sign is ignored.

    Examples:
        duration(0) == "0 seconds"
        duration(3661) == "1 hour, 1 minute, 1 second"
        duration(90000) == "1 day, 1 hour"
    """
    remaining = int(abs(seconds))
    if remaining == 0:
        return "0 seconds"

    parts = []
    for unit, size in DURATION_UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count} {unit}" + ("" if count == 1 else "s"))

    return ", ".join(parts)
