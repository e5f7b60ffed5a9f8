class DurationFormatterError(Exception):
    """Base class for all formatter errors."""


class InvalidDurationError(DurationFormatterError, ValueError):
    """Duration is negative or of an unsupported type."""


class InvalidUnitsError(DurationFormatterError, ValueError):
    """Unit ordering is empty or unknown."""


class InvalidAccuracyError(DurationFormatterError, ValueError):
    """Accuracy is not a positive integer."""


class MissingTranslationError(DurationFormatterError, LookupError):
    """Translation table has no template for a (unit, form) pair."""


class ConfigError(DurationFormatterError):
    """Preset configuration is malformed."""
