"""Clock-time utilities for the expense form.

This module provides the low-level helpers used to work with the start and
end times typed into the form:
- Parsing ``HH:MM`` strings
- Converting clock times to minutes since midnight
- Computing the elapsed hours between two clock times

Times are plain wall-clock values with no date or timezone attached.
"""

import datetime as dt
import re
from typing import Optional, Union

_CLOCK_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def parse_clock_time(value: str) -> dt.time:
    """Parse an ``HH:MM`` string into a dt.time.

    Args:
        value: Clock time such as ``"09:30"``

    Returns:
        The parsed time

    Raises:
        ValueError: If the value is not a valid 24-hour ``HH:MM`` time

    Example:
        >>> parse_clock_time("09:30")
        datetime.time(9, 30)
    """
    match = _CLOCK_PATTERN.fullmatch(value.strip())
    if not match:
        raise ValueError(f"Time '{value}' must be in HH:MM format")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Time '{value}' is out of range")
    return dt.time(hour, minute)


def convert_time_to_minutes(time: Union[str, dt.time]) -> int:
    """Convert a clock time to minutes since midnight.

    Args:
        time: The time to convert, as dt.time or ``HH:MM`` string

    Returns:
        Number of minutes since midnight (0-1439)

    Example:
        >>> convert_time_to_minutes("09:30")
        570
        >>> convert_time_to_minutes(dt.time(23, 59))
        1439
    """
    if isinstance(time, str):
        time = parse_clock_time(time)
    return time.hour * 60 + time.minute


def compute_elapsed_hours(start: Optional[str], end: Optional[str]) -> float:
    """Compute the hours between two clock times.

    Ordering is not enforced here: an end time before the start time gives
    a negative result. Use validate_time_range to reject such pairs.

    Args:
        start: Start time (``HH:MM``) or None/empty
        end: End time (``HH:MM``) or None/empty

    Returns:
        ``(end - start)`` in hours, or 0.0 when either value is missing

    Raises:
        ValueError: If a present value is not a valid ``HH:MM`` time

    Example:
        >>> compute_elapsed_hours("09:00", "17:30")
        8.5
        >>> compute_elapsed_hours("17:00", "09:00")
        -8.0
        >>> compute_elapsed_hours("09:00", None)
        0.0
    """
    if not start or not end:
        return 0.0

    start_minutes = convert_time_to_minutes(start)
    end_minutes = convert_time_to_minutes(end)
    return (end_minutes - start_minutes) / 60
