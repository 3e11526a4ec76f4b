"""Google Sheets API integration."""

from .client import GoogleSheetsClient
from .models import CellReference, SheetInfo, SpreadsheetInfo
from .notation import (
    build_range,
    col_letter_to_index,
    format_sheet_name,
    index_to_col_letter,
    parse_cell_reference,
    quote_sheet_name,
)

__all__ = [
    "GoogleSheetsClient",
    "CellReference",
    "SheetInfo",
    "SpreadsheetInfo",
    "build_range",
    "col_letter_to_index",
    "format_sheet_name",
    "index_to_col_letter",
    "parse_cell_reference",
    "quote_sheet_name",
]
