"""Tests for datasource and datasource entries params."""

import pytest

from cloudinary_metadata.models import (
    DataSourceEntriesParams,
    EntryParams,
    MetadataDataSourceParams,
)
from cloudinary_metadata.utils.errors import InvalidParametersError


def test_entry_requires_value():
    """Test that an entry needs a non-empty value."""
    with pytest.raises(InvalidParametersError, match="value must not be empty"):
        EntryParams().check()

    with pytest.raises(InvalidParametersError):
        EntryParams(value="").check()

    EntryParams(value="red").check()


def test_entry_serialization():
    """Test that external_id is only sent when set."""
    assert EntryParams(value="red").to_params_dictionary() == {"value": "red"}
    assert EntryParams(value="red", external_id="").to_params_dictionary() == {
        "value": "red"
    }
    assert EntryParams(value="red", external_id="c1").to_params_dictionary() == {
        "external_id": "c1",
        "value": "red",
    }


def test_datasource_requires_entries():
    """Test that an empty datasource fails."""
    with pytest.raises(InvalidParametersError, match="values must not be empty"):
        MetadataDataSourceParams().check()


def test_datasource_checks_every_entry():
    """Test that datasource validation cascades to entries."""
    datasource = MetadataDataSourceParams(
        values=[EntryParams(value="ok"), EntryParams(value="")]
    )

    with pytest.raises(InvalidParametersError, match="value must not be empty"):
        datasource.check()


def test_datasource_serialization(datasource):
    """Test that entries keep their order."""
    datasource.check()

    assert datasource.to_params_dictionary() == {
        "values": [
            {"external_id": "color_red", "value": "red"},
            {"value": "green"},
        ]
    }


def test_datasource_entries_params():
    """Test the delete-entries request params."""
    with pytest.raises(InvalidParametersError, match="external_ids must not be empty"):
        DataSourceEntriesParams(external_ids=[]).check()

    params = DataSourceEntriesParams(external_ids=["a", "b"])
    params.check()

    assert params.to_params_dictionary() == {"external_ids": ["a", "b"]}
