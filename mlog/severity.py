"""Syslog severity levels (RFC 5424 section 6.2.1)."""

from enum import IntEnum

from mlog.errors import InvalidSeverityError


class Severity(IntEnum):
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7


MIN_SEVERITY = Severity.EMERGENCY
MAX_SEVERITY = Severity.DEBUG


def is_valid_severity(code) -> bool:
    """Return True if ``code`` is an int in the closed range 0-7."""
    if isinstance(code, bool) or not isinstance(code, int):
        return False
    return MIN_SEVERITY <= code <= MAX_SEVERITY


def validate_severity(code) -> Severity:
    """Return the Severity for ``code``.

    Raises:
        InvalidSeverityError: If ``code`` is not an int between 0 and 7.
    """
    if not is_valid_severity(code):
        raise InvalidSeverityError(f"Severity level must be between 0 and 7, got {code!r}")
    return Severity(code)
