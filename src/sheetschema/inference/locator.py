"""Locate a header row inside a sheet."""

import logging
from typing import Any, Optional

from ..errors import HeaderNotFoundError
from ..sheets import GoogleSheetsClient
from ..sheets.notation import (
    build_range,
    format_sheet_name,
    parse_cell_reference,
    quote_sheet_name,
)
from .models import HeaderLocation

logger = logging.getLogger(__name__)

HEADER_ROW_NOT_FOUND = "header row not found in the provided sheet/headers"


def _clean(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _unformatted(name: str) -> str:
    return name


def _matches(candidates: list[Any], expected: list[str]) -> bool:
    """True when ``candidates`` equals ``expected`` position by position after trimming."""
    if len(candidates) < len(expected):
        return False
    return all(_clean(c) == e.strip() for c, e in zip(candidates, expected))


class HeaderLocator:
    """
    Finds the row and starting column of an ordered header sequence.

    Two strategies:
    - free scan of a bounded window (default ``A1:Z100``), first match in
      row-major order wins
    - anchored check at a caller-supplied start cell, no scanning
    """

    def __init__(
        self,
        sheets_client: GoogleSheetsClient,
        scan_rows: int = 100,
        scan_columns: int = 26,
    ):
        self.sheets_client = sheets_client
        self.scan_rows = scan_rows
        self.scan_columns = scan_columns

    async def locate(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        headers: list[str],
        start_cell: Optional[str] = None,
        diagnostics: Optional[dict] = None,
    ) -> HeaderLocation:
        """Scan for the headers, or check them at ``start_cell`` when given."""
        if start_cell:
            return await self.check_anchored(
                spreadsheet_id, sheet_name, headers, start_cell, diagnostics
            )
        return await self.scan(spreadsheet_id, sheet_name, headers)

    async def scan(
        self, spreadsheet_id: str, sheet_name: str, headers: list[str]
    ) -> HeaderLocation:
        """Search the scan window for the header sequence."""
        scan_range = build_range(sheet_name, 0, 1, self.scan_columns - 1, self.scan_rows)
        values = await self.sheets_client.fetch_values(spreadsheet_id, scan_range)

        width = len(headers)
        for row_index, row in enumerate(values[: self.scan_rows]):
            row = (row or [])[: self.scan_columns]
            for col_index in range(len(row)):
                if _matches(row[col_index : col_index + width], headers):
                    logger.info(
                        f"Found headers in '{sheet_name}' at row {row_index + 1}, "
                        f"column index {col_index}"
                    )
                    return HeaderLocation(
                        sheet_name=sheet_name,
                        start_column_index=col_index,
                        header_row_index=row_index,
                    )

        raise HeaderNotFoundError(HEADER_ROW_NOT_FOUND)

    async def check_anchored(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        headers: list[str],
        start_cell: str,
        diagnostics: Optional[dict] = None,
    ) -> HeaderLocation:
        """
        Confirm the headers sit exactly at ``start_cell``.

        The header range is fetched with the standard sheet-name formatting;
        if that request fails it is retried once with the alternate formatting
        (quoted vs. unquoted) of the same range.

        Raises:
            InvalidFormatError: ``start_cell`` is not a cell reference
            HeaderNotFoundError: both fetches failed or the row does not match
        """
        diagnostics = diagnostics if diagnostics is not None else {}
        attempts = diagnostics.setdefault("attempts", [])

        ref = parse_cell_reference(start_cell, sheet_name)
        start_col = ref.column_index
        end_col = start_col + len(headers) - 1

        primary = build_range(ref.sheet_name, start_col, ref.row_number, end_col, ref.row_number)
        alternate_formatter = (
            quote_sheet_name
            if format_sheet_name(ref.sheet_name) == ref.sheet_name
            else _unformatted
        )
        alternate = build_range(
            ref.sheet_name,
            start_col,
            ref.row_number,
            end_col,
            ref.row_number,
            formatter=alternate_formatter,
        )

        values = None
        for range_notation in (primary, alternate):
            try:
                values = await self.sheets_client.fetch_values(spreadsheet_id, range_notation)
                attempts.append(f"{range_notation}: ok")
                break
            except Exception as e:
                logger.warning(f"Failed to read header range {range_notation}: {e}")
                attempts.append(f"{range_notation}: {e}")

        if values is None:
            raise HeaderNotFoundError(
                f"could not read header range at {ref.cell} in sheet '{ref.sheet_name}'",
                attempts=list(attempts),
            )

        row = values[0] if values else []
        if not _matches(row, headers):
            found = [_clean(v) for v in row]
            raise HeaderNotFoundError(
                f"{HEADER_ROW_NOT_FOUND}: expected {headers} at {ref.cell} "
                f"in sheet '{ref.sheet_name}', found {found}",
                attempts=list(attempts),
            )

        return HeaderLocation(
            sheet_name=ref.sheet_name,
            start_column_index=start_col,
            header_row_index=ref.row_number - 1,
        )
