"""Syslog facility codes (RFC 5424 section 6.2.1, table 1)."""

from enum import IntEnum

from mlog.errors import InvalidFacilityError


class Facility(IntEnum):
    KERNEL = 0
    USER = 1
    MAIL = 2
    DAEMON = 3
    AUTH = 4
    SYSLOG = 5
    LPR = 6
    NEWS = 7
    UUCP = 8
    CRON = 9
    AUTHPRIV = 10
    FTP = 11
    NTP = 12
    AUDIT = 13
    ALERT = 14
    CLOCK = 15
    LOCAL0 = 16
    LOCAL1 = 17
    LOCAL2 = 18
    LOCAL3 = 19
    LOCAL4 = 20
    LOCAL5 = 21
    LOCAL6 = 22
    LOCAL7 = 23


MIN_FACILITY = Facility.KERNEL
MAX_FACILITY = Facility.LOCAL7


def is_valid_facility(code) -> bool:
    if isinstance(code, bool) or not isinstance(code, int):
        return False
    return MIN_FACILITY <= code <= MAX_FACILITY


def validate_facility(code) -> Facility:
    """Return the Facility for ``code``, raising InvalidFacilityError if out of range."""
    if not is_valid_facility(code):
        raise InvalidFacilityError(f"Facility numbers must be between 0 and 23, got {code!r}")
    return Facility(code)
