"""Tests for the config module."""

from pathlib import Path

import pytest

from sheetschema.config import Settings, SpreadsheetConfig, SpreadsheetType
from sheetschema.errors import InvalidArgumentError


class TestSettings:
    """Test Settings configuration."""

    def test_settings_initialization_with_defaults(self, monkeypatch):
        """Test Settings defaults."""
        settings = Settings()

        assert settings.scan_max_rows == 100
        assert settings.scan_max_columns == 26
        assert settings.translate_target_language == "en"

    def test_settings_explicit_values(self, tmp_path):
        """Test Settings built from explicit parameters."""
        creds_path = tmp_path / "creds.json"

        settings = Settings(
            google_credentials_path=creds_path,
            scan_max_rows=50,
            scan_max_columns=10,
            translate_target_language="fr",
            app_env="production",
        )

        assert settings.google_credentials_path == creds_path
        assert isinstance(settings.google_credentials_path, Path)
        assert settings.scan_max_rows == 50
        assert settings.translate_target_language == "fr"
        assert settings.is_production is True

    def test_is_production_false_by_default(self):
        """Test that development is not production."""
        assert Settings(app_env="development").is_production is False


class TestSpreadsheetConfig:
    """Test the spreadsheet ID lookup."""

    def test_from_env_dev(self):
        """Test reading development IDs."""
        environ = {
            "APP_SPREADSHEET_ID_1_DEV": " dev-sheet ",
            "APP_SPREADSHEET_ID_1_PROD": "prod-sheet",
            "APP_SPREADSHEET_ID_3_DEV": "third",
            "APP_SPREADSHEET_ID_2_DEV": "   ",
            "APP_SPREADSHEET_ID_6_DEV": "out-of-range",
        }

        config = SpreadsheetConfig.from_env(environ)

        assert config.ids == {1: "dev-sheet", 3: "third"}
        assert config.get_spreadsheet_id(SpreadsheetType.TODOS) == "dev-sheet"
        assert config.get_spreadsheet_id(3) == "third"

    def test_from_env_prod(self):
        """Test reading production IDs."""
        environ = {
            "APP_SPREADSHEET_ID_1_DEV": "dev-sheet",
            "APP_SPREADSHEET_ID_1_PROD": "prod-sheet",
        }

        config = SpreadsheetConfig.from_env(environ, production=True)

        assert config.production is True
        assert config.get_spreadsheet_id(SpreadsheetType.TODOS) == "prod-sheet"

    def test_from_process_environment(self, monkeypatch):
        """Test that the process environment is used by default."""
        monkeypatch.setenv("APP_SPREADSHEET_ID_1_DEV", "from-env")

        config = SpreadsheetConfig.from_env()

        assert config.get_spreadsheet_id(SpreadsheetType.TODOS) == "from-env"

    def test_missing_id(self):
        """Test that a missing ID raises with a helpful message."""
        config = SpreadsheetConfig()

        with pytest.raises(InvalidArgumentError) as exc_info:
            config.get_spreadsheet_id(SpreadsheetType.TODOS)

        assert "TODOS (1)" in str(exc_info.value)
        assert "APP_SPREADSHEET_ID_{N}_DEV/PROD" in str(exc_info.value)

    def test_missing_unknown_slot(self):
        """Test the message for a slot with no SpreadsheetType."""
        with pytest.raises(InvalidArgumentError, match="type 4 \\(4\\)"):
            SpreadsheetConfig().get_spreadsheet_id(4)
