"""Tests for the error hierarchy."""

import pytest

from cloudinary_metadata.utils.errors import (
    ConfigurationError,
    InvalidParametersError,
    MetadataError,
)


def test_error_message_with_suggestion():
    error = MetadataError("Bad thing", "Try again")

    assert error.message == "Bad thing"
    assert str(error) == "Bad thing. Try again"
    assert str(MetadataError("Bad thing")) == "Bad thing"


def test_invalid_parameters_error_is_value_error():
    """Test that callers can catch invalid params as ValueError."""
    with pytest.raises(ValueError):
        raise InvalidParametersError("label must be specified")

    assert issubclass(InvalidParametersError, MetadataError)
    assert not issubclass(ConfigurationError, ValueError)
