"""Syslog logger: sends RFC 5424 messages to a remote collector over UDP."""

import logging
import socket

from mlog.errors import SinkOpenError
from mlog.facility import validate_facility
from mlog.formatter import encode_syslog_message
from mlog.models import NILVALUE, LogRecord
from mlog.severity import Severity, validate_severity

logger = logging.getLogger(__name__)

DEFAULT_SYSLOG_PORT = 514


def _check_port(port) -> int:
    # Range is left to the transport; a bad range is a send failure.
    if isinstance(port, bool) or not isinstance(port, int):
        raise TypeError(f"Port must be an int, got {type(port).__name__}")
    return port


class SyslogLogger:
    """Fire-and-forget RFC 5424 sender, one datagram per record.

    Structured data is not supported. Send failures are reported on this
    module's logger and the record is dropped.
    """

    def __init__(self, app_name: str | None, facility: int, address: str,
                 port: int = DEFAULT_SYSLOG_PORT, hostname: str | None = None):
        self._app_name = app_name or NILVALUE
        self._facility = validate_facility(facility)
        self._port = _check_port(port)
        self._hostname = hostname

        try:
            infos = socket.getaddrinfo(address, None, type=socket.SOCK_DGRAM)
        except OSError as exc:
            logger.error("Cannot resolve syslog server %s: %s", address, exc)
            raise SinkOpenError(f"Cannot resolve syslog server {address}: {exc}") from exc
        # Prefer IPv4 when a name resolves to both families.
        infos.sort(key=lambda info: info[0] != socket.AF_INET)
        family, _, _, _, sockaddr = infos[0]
        self._address = sockaddr[0]

        sock = None
        try:
            sock = socket.socket(family, socket.SOCK_DGRAM)
            sock.bind(("", 0))
        except OSError as exc:
            if sock is not None:
                sock.close()
            logger.error("Cannot open UDP socket for syslog: %s", exc)
            raise SinkOpenError(f"Cannot open UDP socket for syslog: {exc}") from exc
        self._sock: socket.socket | None = sock

        logger.info("Syslog logger bound to %s, sending to %s:%s",
                    sock.getsockname(), self._address, self._port)

    @property
    def app_name(self) -> str:
        return self._app_name

    @property
    def facility(self) -> int:
        return self._facility

    @property
    def address(self) -> str:
        return self._address

    @property
    def port(self) -> int:
        return self._port

    @property
    def closed(self) -> bool:
        return self._sock is None

    def set_port(self, port: int):
        """Change the remote port used by subsequent sends."""
        self._port = _check_port(port)

    def log(self, message: str, severity: int = Severity.INFORMATIONAL,
            pid: str = NILVALUE, msg_id: str = NILVALUE):
        """Send one record. Invalid severities raise; send failures are reported and dropped."""
        severity = validate_severity(severity)
        if self._sock is None:
            logger.warning("Syslog logger is closed, dropping record")
            return

        record = LogRecord(
            message=message,
            severity=severity,
            pid=pid,
            facility=self._facility,
            msg_id=msg_id,
            app_name=self._app_name,
            hostname=self._hostname,
        )
        data = encode_syslog_message(record)
        try:
            self._sock.sendto(data, (self._address, self._port))
        except (OSError, OverflowError) as exc:
            logger.error("Unable to send syslog message to %s:%s: %s", self._address, self._port, exc)
            return
        logger.debug("Sent %d bytes to %s:%s", len(data), self._address, self._port)

    def close(self):
        """Close the UDP socket. Safe to call more than once."""
        if self._sock is None:
            return
        self._sock.close()
        self._sock = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
