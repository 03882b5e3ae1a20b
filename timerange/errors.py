"""Exception hierarchy for timerange.

Every error raised by the library derives from TimeRangeError, and also from
the builtin the caller would otherwise expect (ValueError/TypeError), so
`except ValueError` keeps working around code that predates these types.
"""


class TimeRangeError(Exception):
    """Base exception for all timerange errors."""


class InvalidRange(TimeRangeError, ValueError):
    """A bound is missing, unparseable, or the pair violates start <= end."""


class InvalidArgument(TimeRangeError, ValueError, TypeError):
    """An operand or option passed to a TimeRange method is not usable.

    Raised for overlap operands of the wrong type or that fail to parse,
    unknown precisions, directions, units or weekdays, and bucket
    intervals that are not positive integers.
    """


__all__ = ["TimeRangeError", "InvalidRange", "InvalidArgument"]
