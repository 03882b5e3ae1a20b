"""Instant handling: turning caller input into datetimes and truncating them.

Parsing is delegated to dateutil; nothing here does calendar math of its own.
"""

from datetime import date, datetime, time
from typing import Literal, TypeAlias

from dateutil.parser import parse

from timerange.errors import InvalidRange, TimeRangeError
from timerange.util import Precision

InstantLike: TypeAlias = datetime | date | str

_FIELDS = ("year", "month", "day", "hour", "minute", "second")


def coerce_instant(
    value: object,
    edge: Literal["start", "end", "operand"],
    error: type[TimeRangeError] = InvalidRange,
) -> datetime:
    """Convert a bound or operand to a datetime.

    Accepts:
    - datetime: returned as-is (naive or aware)
    - date: promoted to midnight of that day
    - str: parsed with dateutil.parser.parse

    Raises:
        error: If value is None, of an unsupported type, or fails to parse
    """
    if value is None:
        raise error(
            f"Missing {edge}: got None.\n"
            f"Pass a datetime, a date, or a string such as '2013-01-01 12:30'."
        )
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return parse(value)
        except (ValueError, OverflowError) as exc:
            raise error(
                f"Could not parse {edge} {value!r} as a date/time.\n"
                f"Parser said: {exc}"
            ) from exc
    raise error(
        f"Invalid {edge}: expected datetime, date, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def truncate(instant: datetime, precision: Precision) -> tuple[int, ...]:
    """Reduce an instant to its calendar fields down to `precision`.

    The tuple runs year first, so lexicographic comparison of two truncated
    instants orders them at that granularity: at MONTH precision every
    instant in the same calendar month compares equal.

    Example:
        >>> truncate(datetime(2013, 1, 1, 23, 30, 31), Precision.HOUR)
        (2013, 1, 1, 23)
    """
    # SECOND (0) keeps all six fields, YEAR (5) keeps only the year
    width = len(_FIELDS) - precision
    return tuple(getattr(instant, name) for name in _FIELDS[:width])
