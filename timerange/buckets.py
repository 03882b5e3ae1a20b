"""Calendar bucket generation backed by dateutil's rrule.

A bucket is the first instant of one calendar unit (minute, hour, day, week,
month). Generation aligns the range start down to its unit boundary and lets
rrule step forward from there, so month lengths, leap days and year rollover
all come from dateutil rather than from arithmetic done here.
"""

import logging
from collections.abc import Iterator
from datetime import datetime
from typing import Literal, TypeAlias

from dateutil.relativedelta import relativedelta
from dateutil.rrule import DAILY, HOURLY, MINUTELY, MO, MONTHLY, WEEKLY, rrule, weekday

from timerange.errors import InvalidArgument
from timerange.util import DEFAULT_DIRECTION, Direction, Precision, to_direction

logger = logging.getLogger(__name__)

Unit: TypeAlias = Literal["minute", "hour", "day", "week", "month"]

_FREQ_MAP: dict[Unit, int] = {
    "minute": MINUTELY,
    "hour": HOURLY,
    "day": DAILY,
    "week": WEEKLY,
    "month": MONTHLY,
}

_MIDNIGHT = relativedelta(hour=0, minute=0, second=0, microsecond=0)

# Absolute replacements that zero every field finer than the unit
_ALIGN: dict[Unit, relativedelta] = {
    "minute": relativedelta(second=0, microsecond=0),
    "hour": relativedelta(minute=0, second=0, microsecond=0),
    "day": _MIDNIGHT,
    "week": _MIDNIGHT,
    "month": relativedelta(day=1, hour=0, minute=0, second=0, microsecond=0),
}

_PRECISION_UNITS: dict[Precision, Unit] = {
    Precision.MINUTE: "minute",
    Precision.HOUR: "hour",
    Precision.DAY: "day",
    Precision.MONTH: "month",
}


def to_unit(unit: "Unit | Precision") -> Unit:
    """Resolve a bucket unit given by name or as a Precision member."""
    if isinstance(unit, Precision):
        if unit in _PRECISION_UNITS:
            return _PRECISION_UNITS[unit]
    elif isinstance(unit, str) and unit.lower() in _FREQ_MAP:
        return unit.lower()  # type: ignore[return-value]

    valid = ", ".join(_FREQ_MAP.keys())
    raise InvalidArgument(
        f"Invalid bucket unit: {unit!r}\n"
        f"Valid units: {valid}\n"
        f"Seconds and years are not generated."
    )


def check_interval(interval: object) -> int:
    if isinstance(interval, bool) or not isinstance(interval, int) or interval < 1:
        raise InvalidArgument(
            f"interval must be a positive integer, got {interval!r}.\n"
            f"Example: interval=2 for every other unit"
        )
    return interval


def align(instant: datetime, unit: Unit, first_day_of_week: weekday = MO) -> datetime:
    """Truncate an instant down to the start of the unit that contains it.

    Weeks roll back to the most recent `first_day_of_week` at or before the
    instant's date.

    Example:
        >>> align(datetime(2014, 12, 3, 15, 20), "week")
        datetime.datetime(2014, 12, 1, 0, 0)
    """
    aligned = instant + _ALIGN[unit]
    if unit == "week":
        # weekday(-1) resolves to today when today already is that weekday
        aligned += relativedelta(weekday=first_day_of_week(-1))
    return aligned


def iter_buckets(
    start: datetime,
    end: datetime,
    unit: "Unit | Precision",
    *,
    interval: int = 1,
    direction: "Direction | str" = DEFAULT_DIRECTION,
    first_day_of_week: weekday = MO,
) -> Iterator[datetime]:
    """Yield unit boundaries covering the closed range [start, end].

    Buckets are always collected stepping forward from the aligned start;
    BACKWARD yields that same collection in reverse. With interval > 1 the
    first backward bucket is therefore the last forward one, which is not
    necessarily the unit containing `end`.

    Args:
        start: Inclusive lower bound
        end: Inclusive upper bound
        unit: "minute", "hour", "day", "week" or "month"
        interval: Step, in units, between consecutive buckets
        direction: FORWARD (ascending) or BACKWARD (descending)
        first_day_of_week: Week boundary for unit="week"

    Raises:
        InvalidArgument: For an unknown unit or direction, or a non-positive
            interval
    """
    unit = to_unit(unit)
    interval = check_interval(interval)
    direction = to_direction(direction)

    dtstart = align(start, unit, first_day_of_week)
    logger.debug(
        "Generating %s buckets every %d from %s to %s (%s)",
        unit,
        interval,
        dtstart,
        end,
        direction.name,
    )

    # until is inclusive, so the boundary of the unit holding `end` is kept
    rules = rrule(
        _FREQ_MAP[unit],
        dtstart=dtstart,
        interval=interval,
        until=end,
        wkst=first_day_of_week,
    )

    if direction is Direction.FORWARD:
        return iter(rules)
    return reversed(list(rules))
