"""Data models for Google Sheets access."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CellReference(BaseModel):
    """A single cell location, e.g. ``Sheet1!A3``."""

    model_config = ConfigDict(frozen=True)

    sheet_name: str
    column_letter: str
    row_number: int = Field(ge=1)  # 1-based

    @property
    def column_index(self) -> int:
        from .notation import col_letter_to_index

        return col_letter_to_index(self.column_letter)

    @property
    def cell(self) -> str:
        return f"{self.column_letter}{self.row_number}"


class SheetInfo(BaseModel):
    """One tab of a spreadsheet."""

    model_config = ConfigDict(frozen=True)

    title: str
    sheet_id: Optional[int] = None
    row_count: Optional[int] = None
    col_count: Optional[int] = None


class SpreadsheetInfo(BaseModel):
    """Spreadsheet metadata: title and the list of sheets."""

    model_config = ConfigDict(frozen=True)

    spreadsheet_id: str
    title: Optional[str] = None
    sheets: list[SheetInfo] = Field(default_factory=list)

    @property
    def sheet_titles(self) -> list[str]:
        return [sheet.title for sheet in self.sheets]
