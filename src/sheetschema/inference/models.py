"""Data models for schema inference."""

import json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FieldType(str, Enum):
    """Value type of a schema field."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"


class _SchemaModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SheetMetadata(_SchemaModel):
    """Resolved identity of a sheet."""

    exact_title: str
    sheet_id: Optional[int] = None
    resolved_from_metadata: bool = True
    fallback_reason: Optional[str] = None  # Why metadata could not be used


class HeaderLocation(_SchemaModel):
    """Where a header row was found (0-based)."""

    sheet_name: str
    start_column_index: int = Field(ge=0)
    header_row_index: int = Field(ge=0)


class FieldSchema(_SchemaModel):
    """One field of an inferred schema."""

    name: str
    type: FieldType = FieldType.STRING
    column: str
    description: Optional[str] = None


class FeatureSchema(_SchemaModel):
    """Schema for a block of sheet data: header location plus fields."""

    sheet_name: str
    header_range: str
    fields: list[FieldSchema] = Field(default_factory=list)


class InferSchemaRequest(_SchemaModel):
    """Input to a schema inference call."""

    spreadsheet_id: str = ""
    sheet_name: str = ""
    headers: list[str] = Field(default_factory=list)
    lang: Optional[str] = None
    header_start_cell: Optional[str] = None


class InferenceResult(BaseModel):
    """Outcome of a schema inference call. Failures are values, never raised."""

    model_config = ConfigDict(frozen=True)

    success: bool
    feature_schema: Optional[FeatureSchema] = None
    data_range: Optional[str] = None
    error: Optional[str] = None
    diagnostics: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return not self.success

    def to_payload(self) -> dict:
        """The schema and its data range as one camelCase dict."""
        if self.feature_schema is None:
            return {}
        payload = self.feature_schema.model_dump(mode="json", by_alias=True, exclude_none=True)
        payload["dataRange"] = self.data_range
        return payload

    @property
    def text(self) -> str:
        """Human-readable rendering: pretty JSON on success, an error message otherwise."""
        if self.success:
            return json.dumps(self.to_payload(), indent=2, ensure_ascii=False)
        text = f"Error: {self.error}"
        if self.diagnostics:
            text += "\n\nDiagnostics:\n" + json.dumps(
                self.diagnostics, indent=2, ensure_ascii=False, default=str
            )
        return text
