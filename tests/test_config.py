"""Tests for settings loading"""

import pytest
from pydantic import ValidationError

from fsutils.core.config import Settings, get_settings, settings


class TestSettings:
    """Test environment-driven settings"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FSUTILS_DEFAULT_DIR_MODE", raising=False)
        monkeypatch.delenv("FSUTILS_ENVIRONMENT", raising=False)
        monkeypatch.delenv("FSUTILS_LOG_FORMAT", raising=False)
        monkeypatch.delenv("FSUTILS_COPY_CHUNK_SIZE", raising=False)

        config = Settings(_env_file=None)

        assert config.default_dir_mode is None
        assert config.copy_chunk_size == 64 * 1024
        assert config.log_format == "console"
        assert config.is_development

    def test_dir_mode_read_as_octal(self, monkeypatch):
        monkeypatch.setenv("FSUTILS_DEFAULT_DIR_MODE", "0750")

        assert Settings(_env_file=None).default_dir_mode == 0o750

    def test_dir_mode_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_dir_mode=0o17777)

    def test_production_forces_json_logs(self, monkeypatch):
        monkeypatch.setenv("FSUTILS_ENVIRONMENT", "production")
        monkeypatch.delenv("FSUTILS_LOG_FORMAT", raising=False)

        config = Settings(_env_file=None)

        assert config.is_production
        assert config.log_format == "json"

    def test_chunk_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, copy_chunk_size=0)

    def test_get_settings_is_cached(self):
        assert get_settings() is settings
