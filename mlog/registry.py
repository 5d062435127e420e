"""Process-wide registry holding at most one file logger and one syslog logger.

Sinks are installed once at startup. Re-initializing an installed sink is an
error unless ``replace=True``, in which case the previous sink is closed once
its replacement is open.
Using a sink before it is installed raises LoggerNotInitializedError.
"""

import logging
import os
import threading

from mlog.config import Config
from mlog.errors import LoggerAlreadyInitializedError, LoggerNotInitializedError
from mlog.file_logger import DEFAULT_LOG_FILE, FileLogger
from mlog.syslog_logger import DEFAULT_SYSLOG_PORT, SyslogLogger

logger = logging.getLogger(__name__)


class LoggerRegistry:
    def __init__(self):
        self._lock = threading.Lock()
        self._file_log: FileLogger | None = None
        self._sys_log: SyslogLogger | None = None

    @property
    def file_log(self) -> FileLogger:
        if self._file_log is None:
            raise LoggerNotInitializedError("File logger is not initialized; call init_file_logger() first")
        return self._file_log

    @property
    def sys_log(self) -> SyslogLogger:
        if self._sys_log is None:
            raise LoggerNotInitializedError("Syslog logger is not initialized; call init_syslog_logger() first")
        return self._sys_log

    @property
    def has_file_log(self) -> bool:
        return self._file_log is not None

    @property
    def has_sys_log(self) -> bool:
        return self._sys_log is not None

    def init_file_logger(self, path: str = DEFAULT_LOG_FILE, append: bool = False,
                         replace: bool = False) -> FileLogger:
        with self._lock:
            previous = self._file_log
            if previous is not None and not replace:
                raise LoggerAlreadyInitializedError(f"File logger already writing to {previous.path}")
            if previous is not None and os.path.abspath(path) == os.path.abspath(previous.path):
                # Reopening the same file must not truncate what was already written.
                append = True
            # The old sink stays installed if the new one fails to open.
            self._file_log = FileLogger(path, append=append)
            if previous is not None:
                previous.close()
                logger.info("Replaced file logger %s with %s", previous.path, path)
            return self._file_log

    def init_syslog_logger(self, app_name: str | None, facility: int, address: str,
                           port: int = DEFAULT_SYSLOG_PORT, replace: bool = False) -> SyslogLogger:
        with self._lock:
            previous = self._sys_log
            if previous is not None and not replace:
                raise LoggerAlreadyInitializedError(
                    f"Syslog logger already sending to {previous.address}:{previous.port}"
                )
            self._sys_log = SyslogLogger(app_name, facility, address, port)
            if previous is not None:
                previous.close()
                logger.info("Replaced syslog logger %s:%s", previous.address, previous.port)
            return self._sys_log

    def configure(self, config: Config, replace: bool = False):
        """Install every sink enabled in ``config``."""
        if config.file_enabled:
            self.init_file_logger(config.file_path, append=config.file_append, replace=replace)
        if config.syslog_enabled:
            self.init_syslog_logger(
                config.syslog_app_name, config.syslog_facility,
                config.syslog_host, config.syslog_port, replace=replace,
            )

    def close(self):
        """Close and uninstall all sinks."""
        with self._lock:
            if self._file_log is not None:
                self._file_log.close()
                self._file_log = None
            if self._sys_log is not None:
                self._sys_log.close()
                self._sys_log = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


_default_registry = LoggerRegistry()


def get_registry() -> LoggerRegistry:
    return _default_registry


def init_file_logger(path: str = DEFAULT_LOG_FILE, append: bool = False,
                     replace: bool = False) -> FileLogger:
    return _default_registry.init_file_logger(path, append=append, replace=replace)


def init_syslog_logger(app_name: str | None, facility: int, address: str,
                       port: int = DEFAULT_SYSLOG_PORT, replace: bool = False) -> SyslogLogger:
    return _default_registry.init_syslog_logger(app_name, facility, address, port, replace=replace)


def file_log() -> FileLogger:
    return _default_registry.file_log


def sys_log() -> SyslogLogger:
    return _default_registry.sys_log


def close_all():
    _default_registry.close()
