"""
Tests for lvlog.config — LoggerConfig validation and logger spec parsing.
"""

import sys

import pytest

from lvlog.config import Flags, LoggerConfig, parse_logger_spec
from lvlog.errors import LoggerConfigError
from lvlog.levels import Level


class TestLoggerConfig:
    """Defaults and coercion."""

    def test_defaults(self):
        cfg = LoggerConfig()
        assert cfg.namespace == ""
        assert cfg.level is Level.NONE
        assert cfg.output_file is None
        assert cfg.stream is None
        assert cfg.flags == Flags.DATE | Flags.TIME
        assert cfg.pretty is False
        assert cfg.color_message is True

    def test_int_level_coerced(self):
        assert LoggerConfig(level=6).level is Level.DEBUG

    def test_bad_level_rejected(self):
        with pytest.raises(LoggerConfigError) as exc:
            LoggerConfig(level=42)
        assert exc.value.option == "level"

    def test_int_flags_coerced(self):
        assert LoggerConfig(flags=3).flags == Flags.STD

    def test_path_output_file(self, tmp_path):
        cfg = LoggerConfig(output_file=tmp_path / "a.log")
        assert cfg.output_file == str(tmp_path / "a.log")

    def test_derive_resets_level(self):
        parent = LoggerConfig(namespace="app", level=Level.ERROR, flags=Flags.NONE, pretty=True)
        child = parent.derive("app.db")
        assert child.namespace == "app.db"
        assert child.level is Level.NONE
        assert child.flags == Flags.NONE
        assert child.pretty is True
        assert parent.namespace == "app"

    def test_derive_with_level(self):
        assert LoggerConfig().derive("x", Level.TRACE).level is Level.TRACE


class TestParseLoggerSpec:
    """Test parse_logger_spec()."""

    def test_name_only(self):
        """Bare namespace defers to the global level."""
        cfg = parse_logger_spec("db")
        assert cfg.namespace == "db"
        assert cfg.level is Level.NONE
        assert cfg.output_file is None
        assert cfg.stream is None

    def test_name_and_level(self):
        cfg = parse_logger_spec("db:debug")
        assert cfg.namespace == "db"
        assert cfg.level is Level.DEBUG

    def test_level_case_insensitive(self):
        assert parse_logger_spec("db:TrAcE").level is Level.TRACE

    def test_empty_level_uses_default(self):
        cfg = parse_logger_spec("db::stderr")
        assert cfg.level is Level.NONE
        assert cfg.stream is sys.stderr

    def test_stdout_destination(self):
        assert parse_logger_spec("db::stdout").stream is sys.stdout

    def test_file_destination(self):
        cfg = parse_logger_spec("db:warn:file:/tmp/db.log")
        assert cfg.level is Level.WARN
        assert cfg.output_file == "/tmp/db.log"
        assert cfg.stream is None

    def test_windows_drive_letter(self):
        """Windows drive letter in location is rejoined."""
        cfg = parse_logger_spec("db:info:file:C:\\logs\\db.log")
        assert cfg.output_file == "C:\\logs\\db.log"

    def test_unknown_level(self):
        with pytest.raises(LoggerConfigError) as exc:
            parse_logger_spec("db:loud")
        assert exc.value.option == "level"

    def test_unknown_destination(self):
        with pytest.raises(LoggerConfigError) as exc:
            parse_logger_spec("db::syslog")
        assert exc.value.option == "destination"

    def test_file_without_location(self):
        with pytest.raises(LoggerConfigError) as exc:
            parse_logger_spec("db::file")
        assert exc.value.option == "output_file"

    def test_too_many_fields(self):
        with pytest.raises(LoggerConfigError):
            parse_logger_spec("db:info:file:/a:/b")

    def test_empty_namespace(self):
        assert parse_logger_spec(":error").namespace == ""
