import logging
from collections.abc import Iterator
from datetime import datetime
from typing import Any

from dateutil.rrule import weekday
from typing_extensions import override

from timerange.buckets import Unit, iter_buckets
from timerange.errors import InvalidArgument, InvalidRange
from timerange.instant import InstantLike, coerce_instant, truncate
from timerange.util import (
    DEFAULT_DIRECTION,
    DEFAULT_FIRST_DAY,
    DEFAULT_PRECISION,
    Day,
    Direction,
    Precision,
    to_precision,
    to_weekday,
)

logger = logging.getLogger(__name__)


def _check_order(start: datetime, end: datetime) -> None:
    try:
        reversed_bounds = start > end
    except TypeError as exc:
        raise InvalidRange(
            f"Cannot order start {start!r} and end {end!r}.\n"
            f"Both bounds must be naive, or both timezone-aware."
        ) from exc
    if reversed_bounds:
        raise InvalidRange(f"TimeRange start ({start}) must be <= end ({end})")


class TimeRange:
    """A closed range [start, end] of calendar time with mutable endpoints.

    Bounds may be given as datetimes, dates (promoted to midnight) or strings
    understood by dateutil's parser. Every construction and mutation keeps
    start <= end; a rejected change leaves the range exactly as it was.

    Iterating a TimeRange yields the midnight of each day it touches.

    Example:
        >>> tr = TimeRange("2013-01-01", "2013-01-05")
        >>> len(list(tr))
        5
        >>> tr.overlaps("2013-01-05 08:00", Precision.DAY)
        True
    """

    def __init__(
        self,
        start: InstantLike,
        end: InstantLike,
        *,
        first_day_of_week: "Day | int | weekday" = DEFAULT_FIRST_DAY,
    ) -> None:
        self._first_day_of_week: weekday = to_weekday(first_day_of_week)
        start_dt = coerce_instant(start, "start")
        end_dt = coerce_instant(end, "end")
        _check_order(start_dt, end_dt)
        self._start: datetime = start_dt
        self._end: datetime = end_dt

    @property
    def start(self) -> datetime:
        return self._start

    @start.setter
    def start(self, value: InstantLike) -> None:
        self.set_range(value, self._end)

    @property
    def end(self) -> datetime:
        return self._end

    @end.setter
    def end(self, value: InstantLike) -> None:
        self.set_range(self._start, value)

    @property
    def first_day_of_week(self) -> weekday:
        return self._first_day_of_week

    def set_start(self, value: InstantLike) -> bool:
        """Replace the start bound. Returns False, changing nothing, if it
        would fall after the current end.

        Raises:
            InvalidRange: If value is missing or cannot be parsed
        """
        start = coerce_instant(value, "start")
        try:
            _check_order(start, self._end)
        except InvalidRange as exc:
            logger.debug("Rejected start %r for %r: %s", value, self, exc)
            return False
        self._start = start
        return True

    def set_end(self, value: InstantLike) -> bool:
        """Replace the end bound. Returns False, changing nothing, if it
        would fall before the current start.

        Raises:
            InvalidRange: If value is missing or cannot be parsed
        """
        end = coerce_instant(value, "end")
        try:
            _check_order(self._start, end)
        except InvalidRange as exc:
            logger.debug("Rejected end %r for %r: %s", value, self, exc)
            return False
        self._end = end
        return True

    def set_range(self, start: InstantLike, end: InstantLike) -> None:
        """Replace both bounds at once.

        The new bounds are validated against each other only, so a range can
        be moved wholesale past its old end.

        Raises:
            InvalidRange: If either bound is invalid or start > end
        """
        try:
            start_dt = coerce_instant(start, "start")
            end_dt = coerce_instant(end, "end")
            _check_order(start_dt, end_dt)
        except InvalidRange as exc:
            logger.debug("Rejected range (%r, %r) for %r: %s", start, end, self, exc)
            raise
        self._start, self._end = start_dt, end_dt

    def overlaps(
        self,
        other: "TimeRange | InstantLike",
        precision: "Precision | str" = DEFAULT_PRECISION,
    ) -> bool:
        """Return True if `other` shares at least one instant with this range.

        Both sides are truncated to `precision` before comparing, so at
        Precision.MINUTE a range ending at 23:30:30 overlaps one starting at
        23:30:31, and at Precision.MONTH any two instants in the same calendar
        month are treated as equal.

        Args:
            other: Another TimeRange, or a single instant (datetime, date or
                parseable string)
            precision: Comparison granularity, SECOND (default) to YEAR

        Raises:
            InvalidArgument: If other is of an unsupported type or does not
                parse, or precision is unknown
        """
        precision = to_precision(precision)
        start = truncate(self._start, precision)
        end = truncate(self._end, precision)

        if isinstance(other, TimeRange):
            return (
                start <= truncate(other._end, precision)
                and truncate(other._start, precision) <= end
            )

        instant = coerce_instant(other, "operand", InvalidArgument)
        return start <= truncate(instant, precision) <= end

    def iter_buckets(
        self,
        unit: "Unit | Precision",
        interval: int = 1,
        direction: "Direction | str" = DEFAULT_DIRECTION,
    ) -> Iterator[datetime]:
        """Lazily yield the start of each `unit` within this range.

        See `timerange.buckets.iter_buckets` for alignment rules.
        """
        return iter_buckets(
            self._start,
            self._end,
            unit,
            interval=interval,
            direction=direction,
            first_day_of_week=self._first_day_of_week,
        )

    def buckets(
        self,
        unit: "Unit | Precision",
        interval: int = 1,
        direction: "Direction | str" = DEFAULT_DIRECTION,
    ) -> list[datetime]:
        result = list(self.iter_buckets(unit, interval, direction))
        logger.debug("%r produced %d %s buckets", self, len(result), unit)
        return result

    def get_minutes(
        self, interval: int = 1, direction: "Direction | str" = DEFAULT_DIRECTION
    ) -> list[datetime]:
        """Start of every `interval`-th minute in the range (seconds zeroed)."""
        return self.buckets("minute", interval, direction)

    def get_hours(
        self, interval: int = 1, direction: "Direction | str" = DEFAULT_DIRECTION
    ) -> list[datetime]:
        """Start of every `interval`-th hour in the range."""
        return self.buckets("hour", interval, direction)

    def get_days(
        self, interval: int = 1, direction: "Direction | str" = DEFAULT_DIRECTION
    ) -> list[datetime]:
        """Midnight of every `interval`-th day in the range."""
        return self.buckets("day", interval, direction)

    def get_weeks(
        self, interval: int = 1, direction: "Direction | str" = DEFAULT_DIRECTION
    ) -> list[datetime]:
        """Midnight of each week's first day, starting from the week holding
        `start` (which may begin before `start` itself)."""
        return self.buckets("week", interval, direction)

    def get_months(
        self, interval: int = 1, direction: "Direction | str" = DEFAULT_DIRECTION
    ) -> list[datetime]:
        """Midnight on the 1st of every `interval`-th month in the range."""
        return self.buckets("month", interval, direction)

    def __iter__(self) -> Iterator[datetime]:
        # Bounds are read when the pass starts; later mutation does not
        # affect a pass already in progress
        return self.iter_buckets("day")

    @override
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TimeRange):
            return NotImplemented
        return (
            self._start == other._start
            and self._end == other._end
            and self._first_day_of_week == other._first_day_of_week
        )

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        return f"TimeRange({self._start!r}, {self._end!r})"

    @override
    def __str__(self) -> str:
        """Human-friendly string showing the range."""
        start = self._start.isoformat(sep=" ")
        end = self._end.isoformat(sep=" ")
        return f"TimeRange({start}→{end})"
