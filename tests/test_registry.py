"""Tests for the logger registry."""

import pytest

import mlog.registry as registry_module
from mlog.config import Config
from mlog.errors import LoggerAlreadyInitializedError, LoggerNotInitializedError, SinkOpenError
from mlog.facility import Facility
from mlog.formatter import parse_syslog_message


def _read_lines(path) -> list[str]:
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


class TestNotInitialized:
    def test_file_log_raises(self, registry):
        with pytest.raises(LoggerNotInitializedError):
            registry.file_log.log("hello")

    def test_sys_log_raises(self, registry):
        with pytest.raises(LoggerNotInitializedError):
            registry.sys_log.log("hello")

    def test_flags(self, registry):
        assert registry.has_file_log is False
        assert registry.has_sys_log is False


class TestInitFileLogger:
    def test_install_and_log(self, registry, tmp_path):
        path = tmp_path / "log.txt"
        flog = registry.init_file_logger(str(path))
        assert registry.file_log is flog
        registry.file_log.log("hello")
        assert _read_lines(path)[0].endswith("Severity 6, PID 0, hello")

    def test_second_init_raises_and_keeps_content(self, registry, tmp_path):
        path = tmp_path / "log.txt"
        first = registry.init_file_logger(str(path))
        first.log("kept")

        with pytest.raises(LoggerAlreadyInitializedError):
            registry.init_file_logger(str(path))

        assert registry.file_log is first
        assert not first.closed
        lines = _read_lines(path)
        assert len(lines) == 1
        assert lines[0].endswith("kept")

    def test_replace_closes_previous(self, registry, tmp_path):
        first = registry.init_file_logger(str(tmp_path / "a.txt"))
        first.log("in a")
        second = registry.init_file_logger(str(tmp_path / "b.txt"), replace=True)

        assert first.closed
        assert registry.file_log is second
        assert _read_lines(tmp_path / "a.txt")[0].endswith("in a")

    def test_replace_same_path_keeps_content(self, registry, tmp_path):
        path = tmp_path / "log.txt"
        first = registry.init_file_logger(str(path))
        first.log("first")
        second = registry.init_file_logger(str(path), replace=True)
        second.log("second")

        assert first.closed
        lines = _read_lines(path)
        assert len(lines) == 2
        assert lines[0].endswith("first")
        assert lines[1].endswith("second")

    def test_failed_replace_keeps_previous(self, registry, tmp_path):
        first = registry.init_file_logger(str(tmp_path / "a.txt"))
        with pytest.raises(SinkOpenError):
            registry.init_file_logger(str(tmp_path / "missing" / "b.txt"), replace=True)
        assert registry.file_log is first
        assert not first.closed

    def test_failed_init_leaves_uninitialized(self, registry, tmp_path):
        with pytest.raises(SinkOpenError):
            registry.init_file_logger(str(tmp_path / "missing" / "log.txt"))
        assert registry.has_file_log is False


class TestInitSyslogLogger:
    def test_install_and_log(self, registry, udp_receiver):
        sock, host, port = udp_receiver
        slog = registry.init_syslog_logger("LogTest", Facility.LOCAL5, host, port)
        assert registry.sys_log is slog
        registry.sys_log.log("hello")
        assert sock.recvfrom(65536)[0].startswith(b"<174>1 ")

    def test_second_init_raises(self, registry, udp_receiver):
        _, host, port = udp_receiver
        registry.init_syslog_logger("app", Facility.LOCAL0, host, port)
        with pytest.raises(LoggerAlreadyInitializedError):
            registry.init_syslog_logger("app", Facility.LOCAL0, host, port)

    def test_replace_closes_previous(self, registry, udp_receiver):
        _, host, port = udp_receiver
        first = registry.init_syslog_logger("app", Facility.LOCAL0, host, port)
        second = registry.init_syslog_logger("app2", Facility.LOCAL1, host, port, replace=True)
        assert first.closed
        assert registry.sys_log is second


class TestConfigureAndClose:
    def test_configure_installs_enabled_sinks(self, registry, tmp_path, udp_receiver):
        sock, host, port = udp_receiver
        config = Config(
            file_path=str(tmp_path / "log.txt"),
            syslog_enabled=True, syslog_app_name="cfg-app",
            syslog_facility=int(Facility.LOCAL3), syslog_host=host, syslog_port=port,
        )
        registry.configure(config)

        registry.file_log.log("to file")
        registry.sys_log.log("to syslog")

        assert _read_lines(tmp_path / "log.txt")[0].endswith("to file")
        parsed = parse_syslog_message(sock.recvfrom(65536)[0])
        assert parsed["app_name"] == "cfg-app"
        assert parsed["facility"] == Facility.LOCAL3

    def test_configure_skips_disabled(self, registry):
        registry.configure(Config(file_enabled=False, syslog_enabled=False))
        assert not registry.has_file_log
        assert not registry.has_sys_log

    def test_close_uninstalls(self, registry, tmp_path, udp_receiver):
        _, host, port = udp_receiver
        flog = registry.init_file_logger(str(tmp_path / "log.txt"))
        slog = registry.init_syslog_logger("app", Facility.LOCAL0, host, port)
        registry.close()

        assert flog.closed and slog.closed
        with pytest.raises(LoggerNotInitializedError):
            registry.file_log
        with pytest.raises(LoggerNotInitializedError):
            registry.sys_log

    def test_context_manager(self, tmp_path):
        with registry_module.LoggerRegistry() as reg:
            flog = reg.init_file_logger(str(tmp_path / "log.txt"))
        assert flog.closed


class TestDefaultRegistry:
    @pytest.fixture(autouse=True)
    def _clean_default(self):
        registry_module.close_all()
        yield
        registry_module.close_all()

    def test_module_functions(self, tmp_path, udp_receiver):
        sock, host, port = udp_receiver
        registry_module.init_file_logger(str(tmp_path / "log.txt"))
        registry_module.init_syslog_logger("LogTest", Facility.LOCAL5, host, port)

        registry_module.file_log().log("This is a test message...")
        registry_module.sys_log().log("This is a test message...")

        assert _read_lines(tmp_path / "log.txt")[0].endswith("This is a test message...")
        assert sock.recvfrom(65536)[0].endswith(b"This is a test message...")
        assert registry_module.get_registry().has_sys_log

    def test_not_initialized(self):
        with pytest.raises(LoggerNotInitializedError):
            registry_module.file_log()
        with pytest.raises(LoggerNotInitializedError):
            registry_module.sys_log()
