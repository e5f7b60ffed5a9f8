from __future__ import annotations

from duration_formatter.errors import (
    ConfigError,
    DurationFormatterError,
    InvalidAccuracyError,
    InvalidDurationError,
    InvalidUnitsError,
    MissingTranslationError,
)
from duration_formatter.formatter import (
    CONCISE,
    CONCISE_LOW_ACCURACY,
    LONG,
    DurationFormatter,
)
from duration_formatter.translations import TRANSLATIONS, Form
from duration_formatter.units import DAY_UNITS, FULL_UNITS, Unit

__all__ = [
    "CONCISE",
    "CONCISE_LOW_ACCURACY",
    "DAY_UNITS",
    "FULL_UNITS",
    "LONG",
    "TRANSLATIONS",
    "ConfigError",
    "DurationFormatter",
    "DurationFormatterError",
    "Form",
    "InvalidAccuracyError",
    "InvalidDurationError",
    "InvalidUnitsError",
    "MissingTranslationError",
    "Unit",
]
