"""Tests for settings loading."""

import pytest

from cloudinary_metadata.settings import MetadataSettings, get_settings, reset_settings
from cloudinary_metadata.utils.errors import ConfigurationError


def test_defaults():
    settings = get_settings()

    assert isinstance(settings, MetadataSettings)
    assert settings.cascade_and_rules is False
    assert settings.log_params is False


def test_settings_are_cached(monkeypatch):
    """Test that settings are read once until reset."""
    first = get_settings()
    monkeypatch.setenv("CLOUDINARY_METADATA_CASCADE_AND_RULES", "1")

    assert get_settings() is first

    reset_settings()
    assert get_settings().cascade_and_rules is True


def test_invalid_settings_raise_configuration_error(monkeypatch):
    monkeypatch.setenv("CLOUDINARY_METADATA_LOG_PARAMS", "not-a-bool")

    with pytest.raises(ConfigurationError, match="CLOUDINARY_METADATA_"):
        get_settings()
