"""A1 notation helpers: column letters, cell references and sheet-name quoting."""

import re
from typing import Callable, Optional

from ..errors import InvalidFormatError
from .models import CellReference

_COLUMN_LETTERS = re.compile(r"[A-Za-z]+")
_CELL = re.compile(r"\$?([A-Za-z]+)\$?(\d+)")
_UNQUOTED_SHEET_NAME = re.compile(r"[A-Za-z0-9_]+")


def col_letter_to_index(col: str) -> int:
    """Convert column letter(s) to 0-based index. A=0, B=1, ..., Z=25, AA=26, etc."""
    if not col or not _COLUMN_LETTERS.fullmatch(col):
        raise InvalidFormatError(f"Invalid column letters: {col!r}")
    result = 0
    for char in col.upper():
        result = result * 26 + (ord(char) - ord("A") + 1)
    return result - 1


def index_to_col_letter(index: int) -> str:
    """Convert 0-based index to column letter(s)."""
    if index < 0:
        raise InvalidFormatError(f"Column index must be non-negative, got {index}")
    result = ""
    index += 1
    while index > 0:
        index -= 1
        result = chr(ord("A") + (index % 26)) + result
        index //= 26
    return result


def quote_sheet_name(name: str) -> str:
    """Wrap a sheet name in single quotes, doubling any embedded quotes."""
    return "'" + name.replace("'", "''") + "'"


def format_sheet_name(name: str) -> str:
    """
    Format a sheet name for use in a range.

    Names made only of ASCII letters, digits and underscores pass through;
    anything else is quoted.
    """
    if _UNQUOTED_SHEET_NAME.fullmatch(name):
        return name
    return quote_sheet_name(name)


def _unquote_sheet_name(name: str) -> str:
    name = name.strip()
    if len(name) >= 2 and name.startswith("'") and name.endswith("'"):
        return name[1:-1].replace("''", "'")
    return name


def parse_cell_reference(ref: str, fallback_sheet: str) -> CellReference:
    """
    Parse ``Sheet!A3``, ``'My Sheet'!A3`` or a bare ``A3``.

    The fallback sheet is used when the reference carries no sheet name.
    """
    if not ref or not ref.strip():
        raise InvalidFormatError("Cell reference is empty")

    sheet_part, separator, cell_part = ref.strip().rpartition("!")
    sheet_name = _unquote_sheet_name(sheet_part) if separator else ""

    match = _CELL.fullmatch(cell_part.strip())
    if not match:
        raise InvalidFormatError(f"Invalid cell reference: {ref!r}")
    row_number = int(match.group(2))
    if row_number < 1:
        raise InvalidFormatError(f"Invalid row number in cell reference: {ref!r}")

    return CellReference(
        sheet_name=sheet_name or fallback_sheet,
        column_letter=match.group(1).upper(),
        row_number=row_number,
    )


def build_range(
    sheet_name: str,
    start_col: int,
    start_row: int,
    end_col: int,
    end_row: Optional[int] = None,
    formatter: Callable[[str], str] = format_sheet_name,
) -> str:
    """
    Build an A1 range such as ``Sheet1!A3:B3``.

    Rows are 1-based. With no end row the range is open-ended (``Sheet1!A4:B``).
    """
    start = f"{index_to_col_letter(start_col)}{start_row}"
    end = index_to_col_letter(end_col)
    if end_row is not None:
        end = f"{end}{end_row}"
    return f"{formatter(sheet_name)}!{start}:{end}"
