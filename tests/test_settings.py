"""Tests for pydantic-settings configuration."""

import pytest
from pydantic import ValidationError

from suggest_members.config import Settings, get_settings, reset_settings
from suggest_members.core.constants import MAX_SUGGESTIONS, MIN_SIMILARITY_SCORE
from suggest_members.core.exceptions import ConfigurationError


class TestSettings:
    """Test settings defaults, environment loading and validation."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        settings = Settings()

        assert settings.debug is False
        assert settings.max_suggestions == MAX_SUGGESTIONS
        assert settings.min_similarity_score == MIN_SIMILARITY_SCORE
        assert settings.manifest_file_name == "package.json"
        assert settings.vendor_directory == "node_modules"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SUGGEST_MAX_SUGGESTIONS", "3")
        monkeypatch.setenv("SUGGEST_MIN_SIMILARITY_SCORE", "0.6")
        monkeypatch.setenv("SUGGEST_DEBUG", "true")

        settings = Settings()

        assert settings.max_suggestions == 3
        assert settings.min_similarity_score == 0.6
        assert settings.debug is True

    def test_env_file(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("SUGGEST_VENDOR_DIRECTORY=vendor\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert Settings().vendor_directory == "vendor"

    @pytest.mark.parametrize("value", [0, 21])
    def test_max_suggestions_bounds(self, value):
        with pytest.raises(ValidationError):
            Settings(max_suggestions=value)

    def test_threshold_bounds(self):
        with pytest.raises(ValidationError):
            Settings(min_similarity_score=1.0)

    @pytest.mark.parametrize("value", ["", "  ", "a/b", "a\\b"])
    def test_plain_names_required(self, value):
        with pytest.raises(ValidationError):
            Settings(vendor_directory=value)

    def test_to_dict(self):
        data = Settings(max_suggestions=2).to_dict()

        assert data["max_suggestions"] == 2
        assert set(data) == {
            "debug",
            "max_suggestions",
            "min_similarity_score",
            "manifest_file_name",
            "vendor_directory",
        }


class TestSettingsSingleton:
    """Test get_settings/reset_settings."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reset_reloads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SUGGEST_MAX_SUGGESTIONS", "2")

        reset_settings()

        assert get_settings() is not first
        assert get_settings().max_suggestions == 2

    def test_invalid_environment_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("SUGGEST_MAX_SUGGESTIONS", "0")

        with pytest.raises(ConfigurationError, match="Invalid suggestion engine configuration"):
            get_settings()
