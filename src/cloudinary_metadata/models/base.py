"""
Base Pydantic model for metadata API params.

Attribute types are enforced by pydantic on construction and assignment;
domain rules are enforced only when ``check()`` is called.
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PrivateAttr

from cloudinary_metadata.utils.errors import InvalidParametersError
from cloudinary_metadata.utils.params import format_date, get_cloudinary_param


def _is_specified(value: Any) -> bool:
    return value is not None and value != ""


def _to_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    return value


def _sort_mappings(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _sort_mappings(v) for k, v in sorted(value.items())}
    if isinstance(value, list):
        return [_sort_mappings(item) for item in value]
    return value


# Datetimes are accepted and truncated to their calendar date
DateValue = Annotated[date, BeforeValidator(_to_date)]


class BaseParams(BaseModel):
    """Base class for all request params.

    Subclasses extend ``add_params_to_dictionary`` (chaining through
    ``super()``) and override ``check`` to enforce their rules.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    _custom_params: dict[str, Any] = PrivateAttr(default_factory=dict)

    def check(self) -> None:
        """Validate the params, raising InvalidParametersError on failure."""

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        """Add this object's keys to ``params``."""

    def to_params_dictionary(self) -> dict[str, Any]:
        """Build the request dictionary with keys sorted ascending."""
        params: dict[str, Any] = {}
        self.add_params_to_dictionary(params)
        for key, value in self._custom_params.items():
            params.setdefault(key, _sort_mappings(value))
        return dict(sorted(params.items()))

    # -------------------- Custom params --------------------

    @property
    def custom_params(self) -> dict[str, Any]:
        return dict(self._custom_params)

    def add_custom_param(self, key: str, value: Any) -> None:
        """Send an extra key the model does not know about."""
        self._custom_params[key] = value

    # -------------------- Helpers --------------------

    @staticmethod
    def add_param(params: dict[str, Any], key: str, value: Any) -> None:
        """Add ``value`` under ``key`` unless it is None or empty.

        Enum members are mapped to their wire string and dates are
        rendered as ``yyyy-MM-dd``.
        """
        if value is None:
            return
        if isinstance(value, (str, list)) and not value:
            return

        if isinstance(value, Enum):
            value = get_cloudinary_param(value)
        elif isinstance(value, date):
            value = format_date(value)
        params[key] = value

    def should_be_specified(self, name: str) -> None:
        if not _is_specified(getattr(self, name)):
            raise InvalidParametersError(f"{name} must be specified")

    def should_not_be_specified(self, name: str) -> None:
        if _is_specified(getattr(self, name)):
            raise InvalidParametersError(f"{name} must not be specified")

    def should_not_be_empty(self, name: str) -> None:
        value = getattr(self, name)
        if value is None or len(value) == 0:
            raise InvalidParametersError(f"{name} must not be empty")
