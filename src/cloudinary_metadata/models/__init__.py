"""
Pydantic models for metadata API params.

Provides metadata field, validation rule and datasource params.
"""

from cloudinary_metadata.models.base import BaseParams
from cloudinary_metadata.models.datasource import (
    DataSourceEntriesParams,
    EntryParams,
    MetadataDataSourceParams,
)
from cloudinary_metadata.models.enums import MetadataFieldType, MetadataValidationType
from cloudinary_metadata.models.fields import (
    DateMetadataFieldCreateParams,
    DateMetadataFieldUpdateParams,
    EnumMetadataFieldCreateParams,
    EnumMetadataFieldUpdateParams,
    IntMetadataFieldCreateParams,
    IntMetadataFieldUpdateParams,
    MetadataFieldBaseParams,
    MetadataFieldCreateParams,
    MetadataFieldUpdateParams,
    SetMetadataFieldCreateParams,
    SetMetadataFieldUpdateParams,
    StringMetadataFieldCreateParams,
    StringMetadataFieldUpdateParams,
)
from cloudinary_metadata.models.validation import (
    AndValidationParams,
    ComparisonValidationParams,
    DateGreaterThanValidationParams,
    DateLessThanValidationParams,
    IntGreaterThanValidationParams,
    IntLessThanValidationParams,
    MetadataValidationParams,
    StringLengthValidationParams,
)

__all__ = [
    # Base models
    "BaseParams",
    # Enums
    "MetadataFieldType",
    "MetadataValidationType",
    # Field models
    "MetadataFieldBaseParams",
    "MetadataFieldCreateParams",
    "MetadataFieldUpdateParams",
    "IntMetadataFieldCreateParams",
    "IntMetadataFieldUpdateParams",
    "StringMetadataFieldCreateParams",
    "StringMetadataFieldUpdateParams",
    "DateMetadataFieldCreateParams",
    "DateMetadataFieldUpdateParams",
    "EnumMetadataFieldCreateParams",
    "EnumMetadataFieldUpdateParams",
    "SetMetadataFieldCreateParams",
    "SetMetadataFieldUpdateParams",
    # Validation models
    "MetadataValidationParams",
    "StringLengthValidationParams",
    "ComparisonValidationParams",
    "IntGreaterThanValidationParams",
    "IntLessThanValidationParams",
    "DateGreaterThanValidationParams",
    "DateLessThanValidationParams",
    "AndValidationParams",
    # Datasource models
    "EntryParams",
    "MetadataDataSourceParams",
    "DataSourceEntriesParams",
]
