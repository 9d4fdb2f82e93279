"""Clock time encoding for schedule comparisons.

Times are encoded by concatenating the hour with the zero-padded minute,
so ``09:00`` becomes ``900`` and ``14:30`` becomes ``1430``. Minutes never
reach 60, which keeps the integer order identical to chronological order.
"""

import re

from .constants import MAX_HOUR, MINUTES_PER_HOUR, TIME_PATTERN, TIME_RANGE_SEPARATOR
from .exceptions import InvalidTimeError, InvalidTimeRangeError


def encode_time(value: str) -> int:
    """Encode an ``HH:MM`` clock time as an order-preserving integer.

    Args:
        value: Time string like "09:00" or "9:00"

    Returns:
        Encoded integer (hour * 100 + minute)

    Raises:
        InvalidTimeError: If the value is not a valid 24-hour time
    """
    if not isinstance(value, str):
        raise InvalidTimeError(str(value))

    match = re.match(TIME_PATTERN, value.strip())
    if not match:
        raise InvalidTimeError(value)

    hour = int(match.group(1))
    minute = int(match.group(2))

    if hour > MAX_HOUR or minute >= MINUTES_PER_HOUR:
        raise InvalidTimeError(value)
    if hour == MAX_HOUR and minute != 0:
        raise InvalidTimeError(value)

    return hour * 100 + minute


def format_time(code: int) -> str:
    """Format an encoded time back to ``HH:MM`` (e.g. 930 -> '09:30')."""
    return f"{code // 100:02d}:{code % 100:02d}"


def parse_time_range(value: str) -> tuple[int, int]:
    """Parse an ``"HH:MM - HH:MM"`` range into encoded start and end.

    Args:
        value: Range string from a scanned schedule slot

    Returns:
        Tuple of (start, end) encoded integers

    Raises:
        InvalidTimeRangeError: If the range cannot be split or either end is invalid
    """
    if not isinstance(value, str):
        raise InvalidTimeRangeError(str(value), "not a string")

    parts = value.split(TIME_RANGE_SEPARATOR)
    if len(parts) != 2:
        raise InvalidTimeRangeError(value, "expected exactly one separator")

    try:
        start = encode_time(parts[0])
        end = encode_time(parts[1])
    except InvalidTimeError as e:
        raise InvalidTimeRangeError(value, str(e)) from e

    return start, end
