"""Enumerations and constants shared across timerange.

Precision levels are ordered from finest to coarsest so they can be compared
(`Precision.MINUTE < Precision.DAY`). Weekday names map onto dateutil's
weekday constants, which is what week alignment and rrule stepping consume.
"""

from enum import IntEnum
from typing import Literal, TypeAlias, TypeVar

from dateutil.rrule import FR, MO, SA, SU, TH, TU, WE, weekday

from timerange.errors import InvalidArgument


E = TypeVar("E", bound=IntEnum)


class Precision(IntEnum):
    SECOND = 0
    MINUTE = 1
    HOUR = 2
    DAY = 3
    MONTH = 4
    YEAR = 5


class Direction(IntEnum):
    BACKWARD = 0
    FORWARD = 1


SECOND = Precision.SECOND
MINUTE = Precision.MINUTE
HOUR = Precision.HOUR
DAY = Precision.DAY
MONTH = Precision.MONTH
YEAR = Precision.YEAR

BACKWARD = Direction.BACKWARD
FORWARD = Direction.FORWARD

Day: TypeAlias = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]

# Mapping from day names to dateutil weekday constants
_DAY_MAP: dict[Day, weekday] = {
    "monday": MO,
    "tuesday": TU,
    "wednesday": WE,
    "thursday": TH,
    "friday": FR,
    "saturday": SA,
    "sunday": SU,
}

# Indexed by datetime.weekday()
_WEEKDAYS: tuple[weekday, ...] = (MO, TU, WE, TH, FR, SA, SU)

DEFAULT_PRECISION = Precision.SECOND
DEFAULT_DIRECTION = Direction.FORWARD
DEFAULT_FIRST_DAY: Day = "monday"


def to_precision(value: "Precision | str") -> Precision:
    """Accept a Precision member, its int value, or its case-insensitive name."""
    return _to_member(Precision, value, "precision")


def to_direction(value: "Direction | str") -> Direction:
    """Accept a Direction member, its int value, or its case-insensitive name."""
    return _to_member(Direction, value, "direction")


def to_weekday(day: "Day | int | weekday") -> weekday:
    """Resolve a first-day-of-week setting to a dateutil weekday.

    Accepts a day name ("monday"), an int as returned by datetime.weekday()
    (Monday == 0), or a dateutil weekday constant such as MO.
    """
    if isinstance(day, weekday):
        # MO(+1) and friends carry an occurrence offset; only the day matters
        return _WEEKDAYS[day.weekday]
    if isinstance(day, int) and not isinstance(day, bool):
        if 0 <= day <= 6:
            return _WEEKDAYS[day]
    elif isinstance(day, str) and day.lower() in _DAY_MAP:
        return _DAY_MAP[day.lower()]  # type: ignore[index]

    valid = ", ".join(_DAY_MAP.keys())
    raise InvalidArgument(
        f"Invalid first day of week: {day!r}\n"
        f"Valid days: {valid}\n"
        f"Integers 0-6 (Monday=0) and dateutil weekdays (MO, TU, ...) also work."
    )


def _to_member(enum: type[E], value: object, label: str) -> E:
    if isinstance(value, enum):
        return value
    if isinstance(value, str) and value.upper() in enum.__members__:
        return enum[value.upper()]
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum(value)
        except ValueError as exc:
            raise _invalid_member(enum, value, label) from exc
    raise _invalid_member(enum, value, label)


def _invalid_member(enum: type[IntEnum], value: object, label: str) -> InvalidArgument:
    valid = ", ".join(name.lower() for name in enum.__members__)
    return InvalidArgument(
        f"Invalid {label}: {value!r}\n"
        f"Use {enum.__name__}.<NAME> or one of: {valid}"
    )
