"""Log record data model shared by the file and syslog sinks."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

NILVALUE = "-"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LogRecord:
    message: str
    severity: int
    pid: str = NILVALUE
    facility: int | None = None      # syslog only
    msg_id: str = NILVALUE           # syslog only
    app_name: str = NILVALUE         # syslog only
    hostname: str | None = None      # syslog only, resolved at format time when None
    timestamp: datetime = field(default_factory=utc_now)
