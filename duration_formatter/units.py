from __future__ import annotations

import math
from datetime import timedelta
from enum import Enum
from typing import Iterable, Union

from duration_formatter.errors import InvalidDurationError, InvalidUnitsError


class Unit(Enum):
    """Time units, largest first, with their estimated length in seconds."""

    # (name, seconds); a year is 365.2425 days, a month is 1/12 of it
    YEARS = ("years", 31_556_952)
    MONTHS = ("months", 2_629_746)
    WEEKS = ("weeks", 7 * 24 * 3600)
    DAYS = ("days", 24 * 3600)
    HOURS = ("hours", 3600)
    MINUTES = ("minutes", 60)
    SECONDS = ("seconds", 1)

    def __init__(self, key: str, seconds: int) -> None:
        self.key = key
        self.seconds = seconds

    def count(self, total_seconds: int) -> int:
        return total_seconds // self.seconds


FULL_UNITS: tuple[Unit, ...] = (
    Unit.YEARS,
    Unit.MONTHS,
    Unit.WEEKS,
    Unit.DAYS,
    Unit.HOURS,
    Unit.MINUTES,
    Unit.SECONDS,
)

DAY_UNITS: tuple[Unit, ...] = (
    Unit.DAYS,
    Unit.HOURS,
    Unit.MINUTES,
    Unit.SECONDS,
)

NAMED_ORDERINGS = {
    "full": FULL_UNITS,
    "day": DAY_UNITS,
}

UnitsArg = Union[str, Unit, Iterable[Unit], None]


def resolve_units(units: UnitsArg = None) -> tuple[Unit, ...]:
    """Return a unit ordering from a name, an iterable of units or ``None``."""
    if units is None:
        return FULL_UNITS
    if isinstance(units, str):
        try:
            return NAMED_ORDERINGS[units.lower()]
        except KeyError:
            raise InvalidUnitsError(f"unknown unit ordering: {units!r}") from None
    if isinstance(units, Unit):
        return (units,)
    try:
        resolved = tuple(units)
    except TypeError:
        raise InvalidUnitsError(f"not a unit ordering: {units!r}") from None
    if not resolved:
        raise InvalidUnitsError("unit ordering is empty")
    for unit in resolved:
        if not isinstance(unit, Unit):
            raise InvalidUnitsError(f"not a time unit: {unit!r}")
    return resolved


def to_seconds(duration: timedelta | int | float) -> int:
    """Convert a duration to whole seconds, rejecting negative spans."""
    if isinstance(duration, timedelta):
        negative = duration < timedelta(0)
        # sub-second part is dropped
        seconds = duration.days * 86400 + duration.seconds
    elif isinstance(duration, (int, float)) and not isinstance(duration, bool):
        if not math.isfinite(duration):
            raise InvalidDurationError(f"duration must be finite: {duration!r}")
        negative = duration < 0
        seconds = int(duration)
    else:
        raise InvalidDurationError(f"unsupported duration type: {type(duration).__name__}")
    if negative:
        raise InvalidDurationError(f"duration must not be negative: {duration!r}")
    return seconds
