"""
cloudinary-metadata.

Request params for the Cloudinary structured metadata API: metadata fields,
validation rules and datasource entries.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cloudinary-metadata")
except PackageNotFoundError:
    __version__ = "unknown"

from .models import (
    AndValidationParams,
    DataSourceEntriesParams,
    DateGreaterThanValidationParams,
    DateLessThanValidationParams,
    DateMetadataFieldCreateParams,
    DateMetadataFieldUpdateParams,
    EntryParams,
    EnumMetadataFieldCreateParams,
    EnumMetadataFieldUpdateParams,
    IntGreaterThanValidationParams,
    IntLessThanValidationParams,
    IntMetadataFieldCreateParams,
    IntMetadataFieldUpdateParams,
    MetadataDataSourceParams,
    MetadataFieldType,
    MetadataValidationType,
    SetMetadataFieldCreateParams,
    SetMetadataFieldUpdateParams,
    StringLengthValidationParams,
    StringMetadataFieldCreateParams,
    StringMetadataFieldUpdateParams,
)
from .utils.errors import InvalidParametersError, MetadataError
from .utils.params import prepare_params, to_json_body

__all__ = [
    "__version__",
    "MetadataFieldType",
    "MetadataValidationType",
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
    "StringLengthValidationParams",
    "IntGreaterThanValidationParams",
    "IntLessThanValidationParams",
    "DateGreaterThanValidationParams",
    "DateLessThanValidationParams",
    "AndValidationParams",
    "EntryParams",
    "MetadataDataSourceParams",
    "DataSourceEntriesParams",
    "MetadataError",
    "InvalidParametersError",
    "prepare_params",
    "to_json_body",
]
