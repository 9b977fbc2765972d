import os

import pytest

from cloudinary_metadata.models import EntryParams, MetadataDataSourceParams
from cloudinary_metadata.settings import reset_settings


@pytest.fixture(autouse=True)
def clear_settings_env(monkeypatch):
    """Run every test with default settings."""
    for key in list(os.environ):
        if key.startswith("CLOUDINARY_METADATA_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def datasource():
    """Fixture for a valid two-entry datasource."""
    return MetadataDataSourceParams(
        values=[
            EntryParams(value="red", external_id="color_red"),
            EntryParams(value="green"),
        ]
    )


@pytest.fixture
def cascade_and_rules(monkeypatch):
    """Enable checking of rules nested in 'and' rules."""
    monkeypatch.setenv("CLOUDINARY_METADATA_CASCADE_AND_RULES", "true")
    reset_settings()
