"""CLI entry point: sends test messages to the configured file and syslog sinks."""

import argparse
import logging
import sys
from dataclasses import replace

from mlog.config import load_config, load_yaml_config
from mlog.errors import MLogError
from mlog.registry import get_registry
from mlog.severity import Severity

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send test log messages to a file and/or a syslog server")
    parser.add_argument("message", nargs="?", default="This is a test message...", help="Message text")
    parser.add_argument("--config", default=None, help="Optional YAML config file")
    parser.add_argument("--file", default=None, help="Log file path")
    parser.add_argument("--no-file", action="store_true", help="Disable the file logger")
    parser.add_argument("--append", action="store_true", help="Append to the log file instead of truncating")
    parser.add_argument("--syslog-host", default=None, help="Syslog server host (enables syslog)")
    parser.add_argument("--syslog-port", type=int, default=None, help="Syslog server port")
    parser.add_argument("--app", default=None, help="Syslog application name")
    parser.add_argument("--facility", type=int, default=None, help="Syslog facility (0-23)")
    parser.add_argument("--severity", type=int, default=int(Severity.INFORMATIONAL), help="Severity (0-7)")
    parser.add_argument("--pid", default=None, help="Process ID field")
    parser.add_argument("--msg-id", default="-", help="Syslog message ID")
    parser.add_argument("--count", type=int, default=1, help="Number of messages to send")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(load_yaml_config(args.config))
    overrides = {}
    if args.file is not None:
        overrides["file_path"] = args.file
    if args.no_file:
        overrides["file_enabled"] = False
    if args.append:
        overrides["file_append"] = True
    if args.syslog_host is not None:
        overrides["syslog_host"] = args.syslog_host
        overrides["syslog_enabled"] = True
    if args.syslog_port is not None:
        overrides["syslog_port"] = args.syslog_port
    if args.app is not None:
        overrides["syslog_app_name"] = args.app
    if args.facility is not None:
        overrides["syslog_facility"] = args.facility
    config = replace(config, **overrides)

    logging.basicConfig(
        level=config.diagnostic_level,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    registry = get_registry()
    try:
        registry.configure(config)
    except (MLogError, ValueError) as exc:
        logger.error("Cannot initialize loggers: %s", exc)
        registry.close()
        return 1

    try:
        for i in range(args.count):
            message = args.message if args.count == 1 else f"{args.message} ({i + 1}/{args.count})"
            if registry.has_file_log:
                registry.file_log.log(message, args.severity, args.pid if args.pid is not None else "0")
            if registry.has_sys_log:
                registry.sys_log.log(message, args.severity, args.pid if args.pid is not None else "-", args.msg_id)
    except ValueError as exc:
        logger.error("Invalid log call: %s", exc)
        return 2
    finally:
        registry.close()

    logger.info("Sent %d message(s)", args.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
