"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, Mock

import pytest

from sheetschema.config import Settings
from sheetschema.sheets import GoogleSheetsClient, SheetInfo, SpreadsheetInfo
from sheetschema.translate import GoogleTranslateClient


@pytest.fixture
def mock_settings() -> Settings:
    """Create settings with test values."""
    return Settings(
        google_credentials_path=None,
        google_token_path=None,
        scan_max_rows=100,
        scan_max_columns=26,
        translate_target_language="en",
        app_env="development",
        log_level="DEBUG",
    )


@pytest.fixture
def spreadsheet_info() -> SpreadsheetInfo:
    """Spreadsheet metadata with a few sheets."""
    return SpreadsheetInfo(
        spreadsheet_id="test-sheet-123",
        title="Test Sheet",
        sheets=[
            SheetInfo(title="Sheet1", sheet_id=0, row_count=1000, col_count=26),
            SheetInfo(title="Members List", sheet_id=42, row_count=500, col_count=10),
        ],
    )


@pytest.fixture
def mock_sheets_client(spreadsheet_info) -> Mock:
    """Create a mocked Google Sheets client."""
    client = Mock(spec=GoogleSheetsClient)
    client.fetch_spreadsheet_info = AsyncMock(return_value=spreadsheet_info)
    client.fetch_values = AsyncMock(return_value=[])
    return client


@pytest.fixture
def mock_translate_client() -> Mock:
    """Create a mocked translation client."""
    client = Mock(spec=GoogleTranslateClient)
    client.translate_batch = AsyncMock(
        return_value=[{"translatedText": "ID"}, {"translatedText": "Name"}]
    )
    return client
