"""Wire enums for metadata field and validation rule types."""

from enum import StrEnum


class MetadataFieldType(StrEnum):
    """Type of value that can be assigned to a metadata field."""

    STRING = "string"
    INTEGER = "integer"
    DATE = "date"
    ENUM = "enum"
    SET = "set"


class MetadataValidationType(StrEnum):
    """Kind of validation rule applied to metadata field values."""

    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    STRING_LENGTH = "strlen"
    AND = "and"
