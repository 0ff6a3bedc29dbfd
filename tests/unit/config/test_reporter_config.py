"""
Unit tests for reporter configuration loading (file + environment).
"""

from pathlib import Path

import pytest

from eventreport.config.config_loader import ConfigLoader
from eventreport.config.configs import ReporterConfig
from eventreport.core.severity import ASL_SEVERITY, LOGGING_SEVERITY
from eventreport.core.target_format import DEFAULT_TARGET_FORMAT, TargetFormat
from eventreport.errors.errors import ConfigurationError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "eventreport.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestReporterConfig:
    def test_defaults(self):
        config = ReporterConfig()
        assert config.output_format == "text"
        assert config.sort_keys is False
        assert config.severity() is ASL_SEVERITY
        assert config.target_format() == DEFAULT_TARGET_FORMAT

    def test_derived_collaborators(self):
        config = ReporterConfig(
            severity_preset="logging", target_fields=("name",), target_separator=" / ", sort_keys=True
        )
        assert config.severity() is LOGGING_SEVERITY
        assert config.target_format() == TargetFormat(("name",), " / ")
        assert config.encoder().sort_keys is True


class TestConfigLoader:
    def test_no_file_no_env_gives_defaults(self):
        assert ConfigLoader().load_reporter_config(environ={}) == ReporterConfig()

    def test_file(self, tmp_path):
        _write(
            tmp_path,
            '[reporter]\noutput_format = "json"\ntarget_fields = ["udid", "name"]\n',
        )
        config = ConfigLoader(base_dir=str(tmp_path)).load_reporter_config("eventreport.toml", environ={})
        assert config.output_format == "json"
        assert config.target_fields == ("udid", "name")

    def test_env_overrides_file(self, tmp_path):
        path = _write(tmp_path, '[reporter]\noutput_format = "json"\nsort_keys = false\n')
        environ = {
            "EVENTREPORT_OUTPUT_FORMAT": "text",
            "EVENTREPORT_SORT_KEYS": "yes",
            "EVENTREPORT_TARGET_FIELDS": "name, state",
            "EVENTREPORT_NOT_A_FIELD": "ignored",
            "HOME": "/root",
        }
        config = ConfigLoader().load_reporter_config(str(path), environ=environ)
        assert config.output_format == "text"
        assert config.sort_keys is True
        assert config.target_fields == ("name", "state")

    def test_env_from_process(self, monkeypatch):
        monkeypatch.setenv("EVENTREPORT_SEVERITY_PRESET", "logging")
        assert ConfigLoader().load_reporter_config().severity_preset == "logging"

    def test_invalid_value(self, tmp_path):
        path = _write(tmp_path, '[reporter]\noutput_format = "yaml"\n')
        with pytest.raises(ConfigurationError) as exc:
            ConfigLoader().load_reporter_config(str(path), environ={})
        assert exc.value.field == "output_format"

    def test_unknown_key(self, tmp_path):
        path = _write(tmp_path, "[reporter]\ncolour = true\n")
        with pytest.raises(ConfigurationError) as exc:
            ConfigLoader().load_reporter_config(str(path), environ={})
        assert exc.value.field == "colour"

    def test_invalid_bool(self):
        with pytest.raises(ConfigurationError):
            ConfigLoader().load_reporter_config(environ={"EVENTREPORT_SORT_KEYS": "maybe"})

    def test_section_must_be_table(self, tmp_path):
        path = _write(tmp_path, 'reporter = "json"\n')
        with pytest.raises(ConfigurationError):
            ConfigLoader().load_reporter_config(str(path), environ={})

    def test_bad_toml(self, tmp_path):
        path = _write(tmp_path, "[reporter\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader().load(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(base_dir=str(tmp_path)).load("nope.toml")

    def test_empty_prefix_rejected(self):
        with pytest.raises(ValueError):
            ConfigLoader(env_prefix="")
