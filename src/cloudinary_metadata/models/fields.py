"""
Metadata field models.

Each field kind (integer, string, date, enum, set) comes in two flavours:
``*CreateParams`` for adding a field, where a label is required, and
``*UpdateParams`` for changing one, where every attribute is optional.
"""

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import Field, StrictInt, model_validator

from cloudinary_metadata.models.base import BaseParams, DateValue
from cloudinary_metadata.models.datasource import MetadataDataSourceParams
from cloudinary_metadata.models.enums import MetadataFieldType
from cloudinary_metadata.models.validation import (
    AndValidationParams,
    DateGreaterThanValidationParams,
    DateLessThanValidationParams,
    IntGreaterThanValidationParams,
    IntLessThanValidationParams,
    MetadataValidationParams,
    StringLengthValidationParams,
)
from cloudinary_metadata.utils.errors import InvalidParametersError

T = TypeVar("T")

ValidationClasses = tuple[type[MetadataValidationParams], ...]

INT_VALIDATIONS: ValidationClasses = (
    IntLessThanValidationParams,
    IntGreaterThanValidationParams,
    AndValidationParams,
)
STRING_VALIDATIONS: ValidationClasses = (
    StringLengthValidationParams,
    AndValidationParams,
)
DATE_VALIDATIONS: ValidationClasses = (
    DateGreaterThanValidationParams,
    DateLessThanValidationParams,
    AndValidationParams,
)


class MetadataFieldBaseParams(BaseParams, Generic[T]):
    """Attributes shared by every metadata field kind.

    ``T`` is the type of the field's default value.
    """

    field_type: ClassVar[MetadataFieldType]

    @model_validator(mode="before")
    @classmethod
    def _require_field_type(cls, data: Any) -> Any:
        if isinstance(data, MetadataFieldBaseParams):
            return data
        if getattr(cls, "field_type", None) is None:
            raise ValueError(f"{cls.__name__} is abstract; use a concrete field class")
        return data

    external_id: str | None = Field(
        default=None,
        description="Unique immutable id of the field (auto-generated if omitted)",
    )
    label: str | None = Field(default=None, description="Display label")
    mandatory: bool = Field(
        default=False, description="Whether a value must be given for this field"
    )
    default_value: T | None = Field(
        default=None, description="Default value (required if mandatory)"
    )
    validation: MetadataValidationParams | None = Field(
        default=None, description="Rule applied when values are assigned"
    )
    datasource: MetadataDataSourceParams | None = Field(
        default=None, description="Allowed values (enum and set fields only)"
    )

    @property
    def type(self) -> MetadataFieldType:
        return self.field_type

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        self.add_param(params, "type", self.type)
        params["mandatory"] = self.mandatory
        self.add_param(params, "external_id", self.external_id)
        self.add_param(params, "default_value", self.default_value)

        if self.validation is not None:
            params["validation"] = self.validation.to_params_dictionary()
        if self.datasource is not None:
            params["datasource"] = self.datasource.to_params_dictionary()

    def check_scalar_data_model(self, allowed: ValidationClasses) -> None:
        """Checks shared by integer, string and date fields.

        Scalar fields take no datasource, and only the rule classes in
        ``allowed`` may be used for validation.
        """
        self.should_not_be_specified("datasource")

        if self.validation is None:
            return

        if type(self.validation) not in allowed:
            names = ", ".join(cls.__name__ for cls in allowed)
            raise InvalidParametersError(
                f"Only validations of types {names} can be applied to the metadata field"
            )

        self.validation.check()


class MetadataFieldCreateParams(MetadataFieldBaseParams[T], Generic[T]):
    """Base class for params that create a metadata field."""

    def check(self) -> None:
        self.should_be_specified("label")
        if self.mandatory:
            self.should_be_specified("default_value")

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        super().add_params_to_dictionary(params)
        params["label"] = self.label


class MetadataFieldUpdateParams(MetadataFieldBaseParams[T], Generic[T]):
    """Base class for params that update a metadata field."""

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        super().add_params_to_dictionary(params)
        self.add_param(params, "label", self.label)


# -------------------- Integer --------------------


class IntMetadataFieldCreateParams(MetadataFieldCreateParams[StrictInt]):
    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.INTEGER

    def check(self) -> None:
        super().check()
        self.check_scalar_data_model(INT_VALIDATIONS)


class IntMetadataFieldUpdateParams(MetadataFieldUpdateParams[StrictInt]):
    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.INTEGER

    def check(self) -> None:
        super().check()
        self.check_scalar_data_model(INT_VALIDATIONS)


# -------------------- String --------------------


class StringMetadataFieldCreateParams(MetadataFieldCreateParams[str]):
    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.STRING

    def check(self) -> None:
        super().check()
        self.check_scalar_data_model(STRING_VALIDATIONS)


class StringMetadataFieldUpdateParams(MetadataFieldUpdateParams[str]):
    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.STRING

    def check(self) -> None:
        super().check()
        self.check_scalar_data_model(STRING_VALIDATIONS)


# -------------------- Date --------------------


class DateMetadataFieldCreateParams(MetadataFieldCreateParams[DateValue]):
    """Date field; the default value is sent as ``yyyy-MM-dd``."""

    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.DATE

    def check(self) -> None:
        super().check()
        self.check_scalar_data_model(DATE_VALIDATIONS)


class DateMetadataFieldUpdateParams(MetadataFieldUpdateParams[DateValue]):
    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.DATE

    def check(self) -> None:
        super().check()
        self.check_scalar_data_model(DATE_VALIDATIONS)


# -------------------- Enum --------------------


class EnumMetadataFieldCreateParams(MetadataFieldCreateParams[str]):
    """Single-value field picked from a datasource."""

    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.ENUM

    def check(self) -> None:
        super().check()
        self.should_be_specified("datasource")
        self.should_not_be_specified("validation")
        self.datasource.check()


class EnumMetadataFieldUpdateParams(MetadataFieldUpdateParams[str]):
    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.ENUM

    def check(self) -> None:
        super().check()
        if self.datasource is not None:
            self.datasource.check()
        self.should_not_be_specified("validation")


# -------------------- Set --------------------


class SetMetadataFieldCreateParams(MetadataFieldCreateParams[list[str]]):
    """Multi-value field picked from a datasource."""

    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.SET

    def check(self) -> None:
        super().check()
        if self.mandatory:
            self.should_not_be_empty("default_value")
        self.should_be_specified("datasource")
        self.should_not_be_specified("validation")
        self.datasource.check()


class SetMetadataFieldUpdateParams(MetadataFieldUpdateParams[list[str]]):
    field_type: ClassVar[MetadataFieldType] = MetadataFieldType.SET

    def check(self) -> None:
        super().check()
        if self.datasource is not None:
            self.datasource.check()
        self.should_not_be_specified("validation")
