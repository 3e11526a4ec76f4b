"""Tests for the Google Sheets and Translation clients."""

from unittest.mock import MagicMock, Mock

import pytest
from googleapiclient.errors import HttpError

from sheetschema.errors import SheetsAPIError, TranslationError
from sheetschema.sheets import GoogleSheetsClient
from sheetschema.translate import GoogleTranslateClient


def http_error(status: int = 403) -> HttpError:
    return HttpError(Mock(status=status, reason="Forbidden"), b'{"error": {"message": "denied"}}')


@pytest.fixture
def sheets_client(mock_settings) -> GoogleSheetsClient:
    """A client with a mocked discovery service."""
    client = GoogleSheetsClient(credentials=Mock(), settings=mock_settings)
    client._service = MagicMock()
    return client


class TestGoogleSheetsClient:
    """Test the Sheets client."""

    def test_get_values(self, sheets_client):
        """Test reading values as a grid of strings."""
        request = sheets_client.service.spreadsheets.return_value.values.return_value.get
        request.return_value.execute.return_value = {"values": [["ID", 1], ["a", None]]}

        values = sheets_client.get_values("abc", "Sheet1!A1:B2")

        assert values == [["ID", "1"], ["a", ""]]
        request.assert_called_once_with(
            spreadsheetId="abc", range="Sheet1!A1:B2", majorDimension="ROWS"
        )

    def test_get_values_empty_range(self, sheets_client):
        """Test that an empty range gives an empty grid."""
        request = sheets_client.service.spreadsheets.return_value.values.return_value.get
        request.return_value.execute.return_value = {"range": "Sheet1!A1:B2"}

        assert sheets_client.get_values("abc", "Sheet1!A1:B2") == []

    def test_get_values_http_error(self, sheets_client):
        """Test that HTTP errors are wrapped."""
        request = sheets_client.service.spreadsheets.return_value.values.return_value.get
        request.return_value.execute.side_effect = http_error()

        with pytest.raises(SheetsAPIError, match="Failed to read range"):
            sheets_client.get_values("abc", "Sheet1!A1:B2")

    def test_get_spreadsheet_info(self, sheets_client):
        """Test parsing spreadsheet metadata."""
        request = sheets_client.service.spreadsheets.return_value.get
        request.return_value.execute.return_value = {
            "spreadsheetId": "abc",
            "properties": {"title": "Book"},
            "sheets": [
                {
                    "properties": {
                        "sheetId": 7,
                        "title": "Data",
                        "gridProperties": {"rowCount": 10, "columnCount": 5},
                    }
                }
            ],
        }

        info = sheets_client.get_spreadsheet_info("abc")

        assert info.title == "Book"
        assert info.sheet_titles == ["Data"]
        assert info.sheets[0].sheet_id == 7
        assert info.sheets[0].row_count == 10

    def test_get_spreadsheet_info_http_error(self, sheets_client):
        """Test that metadata HTTP errors are wrapped."""
        request = sheets_client.service.spreadsheets.return_value.get
        request.return_value.execute.side_effect = http_error(404)

        with pytest.raises(SheetsAPIError):
            sheets_client.get_spreadsheet_info("abc")

    @pytest.mark.asyncio
    async def test_fetch_values_runs_blocking_call(self, sheets_client):
        """Test the async wrapper."""
        request = sheets_client.service.spreadsheets.return_value.values.return_value.get
        request.return_value.execute.return_value = {"values": [["x"]]}

        assert await sheets_client.fetch_values("abc", "A1:A1") == [["x"]]


class TestGoogleTranslateClient:
    """Test the Translation client."""

    @pytest.fixture
    def translate_client(self, mock_settings) -> GoogleTranslateClient:
        client = GoogleTranslateClient(credentials=Mock(), settings=mock_settings)
        client._service = MagicMock()
        return client

    @pytest.mark.asyncio
    async def test_translate_batch(self, translate_client):
        """Test a batch translation call."""
        request = translate_client.service.translations.return_value.list
        request.return_value.execute.return_value = {
            "translations": [{"translatedText": "Name"}]
        }

        result = await translate_client.translate_batch(["名前"], "ja", "en")

        assert result == [{"translatedText": "Name"}]
        request.assert_called_once_with(q=["名前"], source="ja", target="en", format="text")

    def test_translate_http_error(self, translate_client):
        """Test that HTTP errors are wrapped."""
        request = translate_client.service.translations.return_value.list
        request.return_value.execute.side_effect = http_error()

        with pytest.raises(TranslationError):
            translate_client.translate(["名前"], "ja")
