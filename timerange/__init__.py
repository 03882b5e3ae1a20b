from .core import TimeRange
from .errors import InvalidArgument, InvalidRange, TimeRangeError
from .util import (
    BACKWARD,
    DAY,
    FORWARD,
    HOUR,
    MINUTE,
    MONTH,
    SECOND,
    YEAR,
    Direction,
    Precision,
)

__all__ = [
    "TimeRange",
    "Precision",
    "Direction",
    "TimeRangeError",
    "InvalidRange",
    "InvalidArgument",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "MONTH",
    "YEAR",
    "FORWARD",
    "BACKWARD",
]
