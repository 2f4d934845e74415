class MulticalError(Exception):
    """Base error."""

class UnsupportedCalendar(MulticalError, KeyError):
    """Raised when a calendar key does not resolve to a known calendar system."""

    def __init__(self, key: object):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unsupported calendar '{self.key}'"

class MissingCapability(MulticalError, RuntimeError):
    """Raised when a calendar needs a provider (e.g. ICU) that is not available."""

class ConversionError(MulticalError, ValueError):
    """Raised when a provider rejects the fields it was given."""

class DateParseError(MulticalError, ValueError):
    """Raised when a date string cannot be read as year/month/day."""
