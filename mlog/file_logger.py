"""File logger: appends one informal text line per record to a local file."""

import logging

from mlog.errors import SinkOpenError
from mlog.formatter import format_file_line
from mlog.models import LogRecord
from mlog.severity import Severity, validate_severity

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "Log.txt"


class FileLogger:
    """Writes ``TIMESTAMP, Severity S, PID P, MESSAGE`` lines to a file.

    The file is truncated on construction unless ``append`` is True. Every
    record is flushed as soon as it is written.
    """

    def __init__(self, path: str = DEFAULT_LOG_FILE, append: bool = False):
        self._path = path
        mode = "a" if append else "w"
        try:
            self._file = open(path, mode, encoding="utf-8", errors="backslashreplace")
        except OSError as exc:
            logger.error("Cannot open log file %s: %s", path, exc)
            raise SinkOpenError(f"Cannot open log file {path}: {exc}") from exc
        logger.debug("Opened log file %s (mode=%s)", path, mode)

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file is None

    def log(self, message: str, severity: int = Severity.INFORMATIONAL, pid: str = "0"):
        """Write one record. Invalid severities raise; write failures are reported and dropped."""
        severity = validate_severity(severity)
        if self._file is None:
            logger.warning("Log file %s is closed, dropping record", self._path)
            return

        record = LogRecord(message=message, severity=severity, pid=str(pid))
        try:
            self._file.write(format_file_line(record) + "\n")
            self._file.flush()
        except OSError as exc:
            logger.error("Cannot write to log file %s: %s", self._path, exc)

    def close(self):
        """Flush and close the file. Safe to call more than once."""
        if self._file is None:
            return
        try:
            self._file.flush()
            self._file.close()
        except OSError as exc:
            logger.error("Cannot close log file %s: %s", self._path, exc)
        finally:
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
