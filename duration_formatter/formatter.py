from __future__ import annotations

import sys
from datetime import timedelta
from typing import Optional

from duration_formatter.config import Preset, get_preset
from duration_formatter.errors import InvalidAccuracyError
from duration_formatter.logging_config import logger
from duration_formatter.translations import format_part
from duration_formatter.units import Unit, UnitsArg, resolve_units, to_seconds


class DurationFormatter:
    """Formats a duration as its single largest non-zero unit.

    ``concise`` switches from words ("5 минут") to suffixes ("5м").
    ``accuracy`` bounds how many units may be emitted; only the most
    significant unit is ever written, so it does not change the output.
    """

    def __init__(
        self,
        concise: bool = False,
        accuracy: Optional[int] = None,
        units: UnitsArg = None,
    ) -> None:
        if accuracy is None:
            accuracy = sys.maxsize
        if isinstance(accuracy, bool) or not isinstance(accuracy, int) or accuracy < 1:
            raise InvalidAccuracyError(f"accuracy must be a positive integer, got {accuracy!r}")
        self.concise = concise
        self.accuracy = accuracy
        self.units = resolve_units(units)

    @classmethod
    def from_preset(cls, preset: Preset | str | None = None) -> DurationFormatter:
        """Build a formatter from a preset object or a configured preset name."""
        if not isinstance(preset, Preset):
            preset = get_preset(preset)
        return cls(concise=preset.concise, accuracy=preset.accuracy, units=preset.units)

    def format(self, duration: timedelta | int | float, units: UnitsArg = None) -> str:
        """Return ``duration`` rendered with the first unit that fits at least once."""
        seconds = to_seconds(duration)
        ordering = self.units if units is None else resolve_units(units)

        for unit in ordering:
            count = unit.count(seconds)
            if count <= 0:
                continue
            logger.debug("format %ss -> %s %s (concise=%s)", seconds, count, unit.key, self.concise)
            return format_part(count, unit, self.concise)

        logger.debug("format %ss -> no unit fits, using zero seconds", seconds)
        return format_part(0, Unit.SECONDS, self.concise)

    __call__ = format

    def __repr__(self) -> str:
        accuracy = "max" if self.accuracy == sys.maxsize else self.accuracy
        return f"DurationFormatter(concise={self.concise}, accuracy={accuracy})"


LONG = DurationFormatter(False)
CONCISE = DurationFormatter(True)
CONCISE_LOW_ACCURACY = DurationFormatter(True, 3)
