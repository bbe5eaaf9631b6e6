"""Test configuration reading from multiple sources."""

import os
from unittest.mock import patch

import pytest

from humanid.configs.config import AppConfig, get_app_config
from humanid.configs.system import IdsConfig
from humanid.core.models import TypeSpec


@pytest.fixture(autouse=True)
def _no_override_file(monkeypatch):
    monkeypatch.delenv("HUMANID_CONFIG_FILE", raising=False)


class TestConfigSources:
    """Test configuration loading from multiple sources."""

    def test_static_yaml(self):
        config = get_app_config()

        assert config.ids.default_length == 12
        assert config.ids.types["user"] == "user"
        assert config.ids.types["session"] == TypeSpec(prefix="sess", length=24)
        assert config.logging.level == "INFO"

    def test_not_a_singleton(self):
        assert get_app_config() is not get_app_config()

    def test_env_vars_override_yaml(self):
        env_vars = {
            "HUMANID_IDS__DEFAULT_LENGTH": "16",
            "HUMANID_LOGGING__JSON_OUTPUT": "false",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            config = AppConfig()

            assert config.ids.default_length == 16
            assert config.logging.json_output is False

    def test_override_file_wins(self, tmp_path, monkeypatch):
        override = tmp_path / "override.yaml"
        override.write_text(
            "ids:\n"
            "  default_length: 20\n"
            "  types:\n"
            "    invoice:\n"
            "      prefix: inv\n"
            "      length: 10\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("HUMANID_CONFIG_FILE", str(override))
        monkeypatch.setenv("HUMANID_IDS__DEFAULT_LENGTH", "16")

        config = AppConfig()

        assert config.ids.default_length == 20
        assert config.ids.types["invoice"] == TypeSpec(prefix="inv", length=10)

    def test_missing_override_file_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HUMANID_CONFIG_FILE", str(tmp_path / "absent.yaml"))

        config = AppConfig()

        assert config.ids.default_length == 12

    def test_init_kwargs_beat_override_file(self, tmp_path, monkeypatch):
        override = tmp_path / "override.yaml"
        override.write_text(
            "ids:\n  default_length: 20\nlogging:\n  level: ERROR\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("HUMANID_CONFIG_FILE", str(override))

        config = AppConfig(ids=IdsConfig(types={"user": "usr"}, default_length=6))

        assert config.ids.default_length == 6
        assert config.logging.level == "ERROR"

    def test_init_kwargs_win(self):
        config = AppConfig(ids=IdsConfig(types={"user": "usr"}, default_length=6))

        assert config.ids.types == {"user": "usr"}
        assert config.ids.default_length == 6
