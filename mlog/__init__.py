"""mlog: a local file logger and an RFC 5424 UDP syslog logger."""

from mlog.errors import (
    InvalidFacilityError,
    InvalidSeverityError,
    LoggerAlreadyInitializedError,
    LoggerNotInitializedError,
    MLogError,
    SinkOpenError,
)
from mlog.facility import Facility, is_valid_facility, validate_facility
from mlog.file_logger import FileLogger
from mlog.models import NILVALUE, LogRecord
from mlog.registry import (
    LoggerRegistry,
    close_all,
    file_log,
    get_registry,
    init_file_logger,
    init_syslog_logger,
    sys_log,
)
from mlog.severity import Severity, is_valid_severity, validate_severity
from mlog.syslog_logger import SyslogLogger

__version__ = "0.1.0"
