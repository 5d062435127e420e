"""Log record formatters: RFC 5424 syslog messages and simple file lines."""

import re
import socket
from datetime import datetime, timezone

from mlog.facility import Facility, validate_facility
from mlog.models import NILVALUE, LogRecord
from mlog.severity import Severity, validate_severity

SYSLOG_VERSION = "1"
MAX_PRI = 23 * 8 + 7

_HEADER_RE = re.compile(r"^<(\d{1,3})>(\d{1,2})$")


def format_timestamp(moment: datetime | None = None) -> str:
    """Render an instant as UTC with microsecond precision, e.g. 2024-01-15T08:23:45.123456Z."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def resolve_hostname() -> str:
    """Best-effort local hostname; NILVALUE if it cannot be determined."""
    try:
        hostname = socket.gethostname()
    except OSError:
        return NILVALUE
    return hostname or NILVALUE


def encode_pri(facility: int, severity: int) -> int:
    return validate_facility(facility) * 8 + validate_severity(severity)


def decode_pri(pri: int) -> tuple[Facility, Severity]:
    """Split a PRI value back into (facility, severity).

    Raises:
        ValueError: If ``pri`` is outside 0-191.
    """
    if not 0 <= pri <= MAX_PRI:
        raise ValueError(f"PRI must be between 0 and {MAX_PRI}, got {pri}")
    facility, severity = divmod(pri, 8)
    return Facility(facility), Severity(severity)


def format_msg_id(msg_id: str) -> str:
    # Non-nil message IDs are emitted with an "ID" prefix.
    if msg_id == NILVALUE:
        return NILVALUE
    return f"ID{msg_id}"


def _nil_if_empty(value) -> str:
    if value is None or value == "":
        return NILVALUE
    return str(value)


def format_syslog_message(record: LogRecord) -> str:
    """Build an RFC 5424 message from a record.

    Layout: ``<PRI>1 TIMESTAMP HOSTNAME APPNAME PROCID MSGID - MESSAGE``.
    Structured data is not supported and is always the NILVALUE.
    """
    if record.facility is None:
        raise ValueError("Syslog records require a facility")
    pri = encode_pri(record.facility, record.severity)
    hostname = record.hostname if record.hostname is not None else resolve_hostname()

    return " ".join([
        f"<{pri}>{SYSLOG_VERSION}",
        format_timestamp(record.timestamp),
        _nil_if_empty(hostname),
        _nil_if_empty(record.app_name),
        _nil_if_empty(record.pid),
        format_msg_id(record.msg_id),
        NILVALUE,
        record.message,
    ])


def encode_syslog_message(record: LogRecord) -> bytes:
    """Format a record and encode it as UTF-8; unencodable characters are backslash-escaped."""
    return format_syslog_message(record).encode("utf-8", errors="backslashreplace")


def parse_syslog_message(data: bytes | str) -> dict:
    """Parse a message produced by format_syslog_message.

    Returns a dict with pri, facility, severity, version, timestamp, hostname,
    app_name, pid, msg_id, structured_data and message keys.

    Raises:
        ValueError: If the header is malformed.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")

    parts = data.split(" ", 7)
    if len(parts) < 7:
        raise ValueError(f"Expected at least 7 header fields, got {len(parts)}")
    header, timestamp, hostname, app_name, pid, msg_id, structured_data = parts[:7]
    message = parts[7] if len(parts) == 8 else ""

    match = _HEADER_RE.match(header)
    if not match:
        raise ValueError(f"Malformed PRI/VERSION field: {header!r}")
    pri = int(match.group(1))
    facility, severity = decode_pri(pri)

    return {
        "pri": pri,
        "facility": facility,
        "severity": severity,
        "version": match.group(2),
        "timestamp": timestamp,
        "hostname": hostname,
        "app_name": app_name,
        "pid": pid,
        "msg_id": msg_id,
        "structured_data": structured_data,
        "message": message,
    }


def format_file_line(record: LogRecord) -> str:
    """Build the informal file line: ``TIMESTAMP, Severity S, PID P, MESSAGE``."""
    return (
        f"{format_timestamp(record.timestamp)}, Severity {int(record.severity)}, "
        f"PID {record.pid}, {record.message}"
    )
