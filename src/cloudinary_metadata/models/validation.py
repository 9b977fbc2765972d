"""
Validation rule models for metadata fields.

Rules are attached to a field's ``validation`` attribute and constrain the
values that can be assigned to the field. The ``and`` rule combines several
rules into one.
"""

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import Field, StrictInt, model_validator

from cloudinary_metadata.models.base import BaseParams, DateValue
from cloudinary_metadata.models.enums import MetadataValidationType
from cloudinary_metadata.settings import get_settings
from cloudinary_metadata.utils.errors import InvalidParametersError

T = TypeVar("T")


class MetadataValidationParams(BaseParams):
    """Base class for all validation rules."""

    rule_type: ClassVar[MetadataValidationType]

    @model_validator(mode="before")
    @classmethod
    def _require_rule_type(cls, data: Any) -> Any:
        if isinstance(data, MetadataValidationParams):
            return data
        if getattr(cls, "rule_type", None) is None:
            raise ValueError(f"{cls.__name__} is abstract; use a concrete rule class")
        return data

    @property
    def type(self) -> MetadataValidationType:
        return self.rule_type

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        self.add_param(params, "type", self.type)


class StringLengthValidationParams(MetadataValidationParams):
    """Length bounds for string field values."""

    rule_type: ClassVar[MetadataValidationType] = MetadataValidationType.STRING_LENGTH

    min: StrictInt | None = Field(default=None, description="Minimum string length")
    max: StrictInt | None = Field(default=None, description="Maximum string length")

    def check(self) -> None:
        if self.min is None and self.max is None:
            raise InvalidParametersError("Either min or max must be specified")
        if self.min is not None and self.min < 0:
            raise InvalidParametersError("min must be a non-negative integer")
        if self.max is not None and self.max < 0:
            raise InvalidParametersError("max must be a non-negative integer")

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        super().add_params_to_dictionary(params)
        self.add_param(params, "min", self.min)
        self.add_param(params, "max", self.max)


class ComparisonValidationParams(MetadataValidationParams, Generic[T]):
    """Base class for rules comparing field values against ``value``."""

    value: T | None = Field(default=None, description="Value to compare against")
    is_equal: bool = Field(
        default=False, description="Whether equality also satisfies the rule"
    )

    def check(self) -> None:
        self.should_be_specified("value")

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        super().add_params_to_dictionary(params)
        params["equals"] = self.is_equal
        self.add_param(params, "value", self.value)


class IntGreaterThanValidationParams(ComparisonValidationParams[StrictInt]):
    """Integer values must be greater than ``value``."""

    rule_type: ClassVar[MetadataValidationType] = MetadataValidationType.GREATER_THAN


class IntLessThanValidationParams(ComparisonValidationParams[StrictInt]):
    """Integer values must be less than ``value``."""

    rule_type: ClassVar[MetadataValidationType] = MetadataValidationType.LESS_THAN


class DateGreaterThanValidationParams(ComparisonValidationParams[DateValue]):
    """Dates must be after ``value``."""

    rule_type: ClassVar[MetadataValidationType] = MetadataValidationType.GREATER_THAN


class DateLessThanValidationParams(ComparisonValidationParams[DateValue]):
    """Dates must be before ``value``."""

    rule_type: ClassVar[MetadataValidationType] = MetadataValidationType.LESS_THAN


class AndValidationParams(MetadataValidationParams):
    """All nested rules must hold.

    Nested rules are only checked when ``cascade_and_rules`` is enabled in
    the settings.
    """

    rule_type: ClassVar[MetadataValidationType] = MetadataValidationType.AND

    rules: list[MetadataValidationParams] = Field(
        default_factory=list, description="Rules combined with AND"
    )

    def check(self) -> None:
        self.should_not_be_empty("rules")
        if get_settings().cascade_and_rules:
            for rule in self.rules:
                rule.check()

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        super().add_params_to_dictionary(params)
        params["rules"] = [rule.to_params_dictionary() for rule in self.rules]
