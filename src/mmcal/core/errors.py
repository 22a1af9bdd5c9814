class MmcalError(Exception):
    """Base error."""

class ConfigError(MmcalError, ValueError):
    """Raised for an invalid CalendarConfig."""

class ConstantTableError(MmcalError, ArithmeticError):
    """Raised when era constants produce a non-finite intermediate (a table bug, not a date edge case)."""
