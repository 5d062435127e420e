"""Configuration loading from an optional YAML file and environment variables."""

import logging
import os
from dataclasses import dataclass

import yaml

from mlog.facility import Facility, validate_facility

logger = logging.getLogger(__name__)

DIAGNOSTIC_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    file_enabled: bool = True
    file_path: str = "Log.txt"
    file_append: bool = False
    syslog_enabled: bool = False
    syslog_app_name: str = "-"
    syslog_facility: int = int(Facility.LOCAL0)
    syslog_host: str = "localhost"
    syslog_port: int = 514
    diagnostic_level: str = "WARNING"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path or file is missing."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from defaults <- YAML data <- env vars (highest priority).

    YAML layout::

        file: {enabled: true, path: Log.txt, append: false}
        syslog: {enabled: true, app_name: myapp, facility: 16, host: 10.0.0.5, port: 514}
        diagnostic_level: WARNING
    """
    yaml_data = yaml_data or {}
    file_section = yaml_data.get("file") or {}
    syslog_section = yaml_data.get("syslog") or {}

    file_enabled = file_section.get("enabled", Config.file_enabled)
    file_path = file_section.get("path", Config.file_path)
    file_append = file_section.get("append", Config.file_append)
    syslog_enabled = syslog_section.get("enabled", Config.syslog_enabled)
    syslog_app_name = syslog_section.get("app_name", Config.syslog_app_name)
    syslog_facility = syslog_section.get("facility", Config.syslog_facility)
    syslog_host = syslog_section.get("host", Config.syslog_host)
    syslog_port = syslog_section.get("port", Config.syslog_port)
    diagnostic_level = yaml_data.get("diagnostic_level", Config.diagnostic_level)

    diagnostic_level = os.environ.get("MLOG_DIAGNOSTIC_LEVEL", diagnostic_level).upper()
    if diagnostic_level not in DIAGNOSTIC_LEVELS:
        raise ValueError(f"Unknown diagnostic level: {diagnostic_level}")

    return Config(
        file_enabled=_parse_bool(os.environ.get("MLOG_FILE_ENABLED", file_enabled)),
        file_path=os.environ.get("MLOG_FILE_PATH", file_path),
        file_append=_parse_bool(os.environ.get("MLOG_FILE_APPEND", file_append)),
        syslog_enabled=_parse_bool(os.environ.get("MLOG_SYSLOG_ENABLED", syslog_enabled)),
        syslog_app_name=os.environ.get("MLOG_SYSLOG_APP", syslog_app_name),
        syslog_facility=int(validate_facility(
            int(os.environ.get("MLOG_SYSLOG_FACILITY", syslog_facility))
        )),
        syslog_host=os.environ.get("MLOG_SYSLOG_HOST", syslog_host),
        syslog_port=int(os.environ.get("MLOG_SYSLOG_PORT", syslog_port)),
        diagnostic_level=diagnostic_level,
    )
