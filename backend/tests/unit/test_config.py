"""
Tests for environment-driven settings.
"""

import logging

import pytest

from clinic.core.config import Settings, get_env_flag, load_settings


@pytest.mark.config
class TestEnvFlags:
    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", " Yes "])
    def test_truthy_values(self, monkeypatch, value):
        monkeypatch.setenv("CLINIC_CASCADE_ON_DELETE", value)
        assert get_env_flag("CLINIC_CASCADE_ON_DELETE") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "on", ""])
    def test_everything_else_is_false(self, monkeypatch, value):
        monkeypatch.setenv("CLINIC_CASCADE_ON_DELETE", value)
        assert get_env_flag("CLINIC_CASCADE_ON_DELETE") is False

    def test_default_applies_when_unset(self):
        assert get_env_flag("CLINIC_CASCADE_ON_DELETE") is False
        assert get_env_flag("CLINIC_CASCADE_ON_DELETE", default="true") is True


@pytest.mark.config
class TestLoadSettings:
    def test_defaults(self, tmp_path):
        empty_env = tmp_path / ".env"
        empty_env.write_text("")

        settings = load_settings(str(empty_env))

        assert settings == Settings()
        assert settings.cascade_on_delete is False
        assert settings.cancelled_slots_block is False
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CLINIC_CANCELLED_SLOTS_BLOCK", "1")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_DIR", str(tmp_path))

        settings = load_settings(str(tmp_path / "missing.env"))

        assert settings.cancelled_slots_block is True
        assert settings.log_level == "DEBUG"
        assert settings.log_dir == str(tmp_path)

    def test_reads_env_file(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("CLINIC_CASCADE_ON_DELETE=true\nLOG_JSON_FORMAT=yes\n")
        # load_dotenv writes into os.environ; register both names so
        # monkeypatch removes them again on teardown
        for name in ("CLINIC_CASCADE_ON_DELETE", "LOG_JSON_FORMAT"):
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)

        settings = load_settings(str(env_file))

        assert settings.cascade_on_delete is True
        assert settings.log_json_format is True

    def test_environment_wins_over_env_file(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("CLINIC_CASCADE_ON_DELETE=true\n")
        monkeypatch.setenv("CLINIC_CASCADE_ON_DELETE", "false")

        assert load_settings(str(env_file)).cascade_on_delete is False

    def test_cascade_enabled_logs_warning(self, monkeypatch, tmp_path, caplog):
        monkeypatch.setenv("CLINIC_CASCADE_ON_DELETE", "true")

        with caplog.at_level(logging.WARNING, logger="clinic.core.config"):
            load_settings(str(tmp_path / "missing.env"))

        assert "Cascading removals are ENABLED" in caplog.text

    def test_settings_as_dict(self):
        assert Settings(cascade_on_delete=True).as_dict()["cascade_on_delete"] is True
