"""Tests for pod_inventory.config."""
import logging

import pytest

from pod_inventory import config
from pod_inventory.config import FeatureFlags, SerializationConfig


@pytest.fixture
def restore_settings(monkeypatch):
    """Restore settings classes after tests that reload them."""
    for cls in (SerializationConfig, FeatureFlags):
        for name in dir(cls):
            if name.isupper():
                monkeypatch.setattr(cls, name, getattr(cls, name))


class TestLoadEnvironment:
    def test_loads_env_file(self, tmp_path, monkeypatch, restore_settings):
        env_file = tmp_path / ".env"
        env_file.write_text("OUTPUT_FORMAT=table\nJSON_INDENT=4\nSTRICT_PAYLOADS=true\n")
        # setenv first so monkeypatch removes the values load_dotenv writes
        for name in ("OUTPUT_FORMAT", "JSON_INDENT", "STRICT_PAYLOADS"):
            monkeypatch.setenv(name, "unset")
            monkeypatch.delenv(name)

        config.load_environment(str(env_file))

        assert SerializationConfig.DEFAULT_OUTPUT_FORMAT == "table"
        assert SerializationConfig.JSON_INDENT == 4
        assert FeatureFlags.STRICT_PAYLOADS is True

    def test_missing_env_file(self, tmp_path, caplog, restore_settings):
        with caplog.at_level(logging.WARNING):
            config.load_environment(str(tmp_path / "missing.env"))
        assert "Environment file not found" in caplog.text


class TestValidateConfig:
    def test_valid(self, monkeypatch):
        monkeypatch.setattr(SerializationConfig, "DEFAULT_OUTPUT_FORMAT", "list")
        monkeypatch.setattr(SerializationConfig, "JSON_INDENT", 2)
        monkeypatch.setattr(SerializationConfig, "SNAPSHOT_FILE", None)
        config.validate_config()

    def test_reports_all_errors(self, monkeypatch):
        monkeypatch.setattr(SerializationConfig, "DEFAULT_OUTPUT_FORMAT", "yaml")
        monkeypatch.setattr(SerializationConfig, "JSON_INDENT", -1)

        with pytest.raises(ValueError) as exc_info:
            config.validate_config()

        message = str(exc_info.value)
        assert "OUTPUT_FORMAT" in message
        assert "JSON_INDENT" in message


class TestSetupLogging:
    def test_verbose_sets_debug(self):
        root = logging.getLogger()
        previous = root.level
        try:
            config.setup_logging(verbose=True)
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_log_file(self, tmp_path):
        root = logging.getLogger()
        previous_level = root.level
        previous_handlers = list(root.handlers)
        log_file = tmp_path / "snapshot.log"
        try:
            config.setup_logging(log_file=str(log_file))
            logging.getLogger("pod_inventory.test").error("written to file")
        finally:
            for handler in root.handlers:
                if handler not in previous_handlers:
                    handler.close()
                    root.removeHandler(handler)
            root.setLevel(previous_level)

        assert "written to file" in log_file.read_text()
