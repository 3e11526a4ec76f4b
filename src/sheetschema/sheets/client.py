"""Read-only Google Sheets API client."""

import asyncio
import logging
from typing import Optional

from google.auth.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..config import Settings, settings as default_settings
from ..credentials import load_credentials
from ..errors import SheetsAPIError
from .models import SheetInfo, SpreadsheetInfo

logger = logging.getLogger(__name__)


class GoogleSheetsClient:
    """Client for reading values and metadata from Google Sheets."""

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self._credentials = credentials
        self._service = None

    @property
    def service(self):
        """Get or create the Sheets API service."""
        if self._service is None:
            if self._credentials is None:
                self._credentials = load_credentials(self.settings)
            self._service = build(
                "sheets", "v4", credentials=self._credentials, cache_discovery=False
            )
        return self._service

    def get_spreadsheet_info(self, spreadsheet_id: str) -> SpreadsheetInfo:
        """Get the spreadsheet title and its sheets."""
        try:
            result = (
                self.service.spreadsheets()
                .get(
                    spreadsheetId=spreadsheet_id,
                    fields="spreadsheetId,properties.title,sheets.properties",
                )
                .execute()
            )
        except HttpError as e:
            raise SheetsAPIError(f"Failed to get spreadsheet info: {e}") from e

        sheets = []
        for sheet in result.get("sheets", []):
            props = sheet.get("properties", {})
            grid = props.get("gridProperties", {})
            sheets.append(
                SheetInfo(
                    title=props.get("title", ""),
                    sheet_id=props.get("sheetId"),
                    row_count=grid.get("rowCount"),
                    col_count=grid.get("columnCount"),
                )
            )
        return SpreadsheetInfo(
            spreadsheet_id=result.get("spreadsheetId", spreadsheet_id),
            title=result.get("properties", {}).get("title"),
            sheets=sheets,
        )

    def get_values(self, spreadsheet_id: str, range_notation: str) -> list[list[str]]:
        """Read the displayed values of a range. An empty range gives an empty grid."""
        logger.debug(f"Reading range {range_notation} from {spreadsheet_id}")
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(
                    spreadsheetId=spreadsheet_id,
                    range=range_notation,
                    majorDimension="ROWS",
                )
                .execute()
            )
        except HttpError as e:
            raise SheetsAPIError(f"Failed to read range {range_notation}: {e}") from e

        return [
            ["" if value is None else str(value) for value in row]
            for row in result.get("values", [])
        ]

    async def fetch_spreadsheet_info(self, spreadsheet_id: str) -> SpreadsheetInfo:
        return await asyncio.to_thread(self.get_spreadsheet_info, spreadsheet_id)

    async def fetch_values(self, spreadsheet_id: str, range_notation: str) -> list[list[str]]:
        return await asyncio.to_thread(self.get_values, spreadsheet_id, range_notation)
