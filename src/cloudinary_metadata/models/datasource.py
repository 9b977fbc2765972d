"""
Datasource models for enum and set metadata fields.

A datasource is the list of values a user may pick from. Each entry can
carry a stable external id used to reference it later.
"""

from typing import Any

from pydantic import Field

from cloudinary_metadata.models.base import BaseParams


class EntryParams(BaseParams):
    """A single datasource value."""

    value: str | None = Field(default=None, description="Value shown to users")
    external_id: str | None = Field(
        default=None,
        description="Unique immutable id of the entry (auto-generated if omitted)",
    )

    def check(self) -> None:
        self.should_not_be_empty("value")

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        params["value"] = self.value
        self.add_param(params, "external_id", self.external_id)


class MetadataDataSourceParams(BaseParams):
    """Ordered list of datasource entries."""

    values: list[EntryParams] = Field(
        default_factory=list, description="Datasource entries, in display order"
    )

    def check(self) -> None:
        self.should_not_be_empty("values")
        for entry in self.values:
            entry.check()

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        params["values"] = [entry.to_params_dictionary() for entry in self.values]


class DataSourceEntriesParams(BaseParams):
    """Datasource entries to delete (or restore), by external id."""

    external_ids: list[str] = Field(
        default_factory=list, description="External ids of the entries"
    )

    def check(self) -> None:
        self.should_not_be_empty("external_ids")

    def add_params_to_dictionary(self, params: dict[str, Any]) -> None:
        params["external_ids"] = self.external_ids
