"""Configuration management for sheetschema."""

import os
from enum import IntEnum
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidArgumentError

load_dotenv()

SPREADSHEET_ID_SLOTS = range(1, 6)


def _optional_path(name: str) -> Optional[Path]:
    """Read an optional path from the environment."""
    value = os.getenv(name)
    return Path(value) if value else None


class Settings(BaseModel):
    """Application settings."""

    # Google API credentials (service account or authorized user JSON).
    # Application Default Credentials are used when neither is set.
    google_credentials_path: Optional[Path] = _optional_path("GOOGLE_CREDENTIALS_PATH")
    google_token_path: Optional[Path] = _optional_path("GOOGLE_TOKEN_PATH")

    # Header scan window (A1:Z100 by default)
    scan_max_rows: int = int(os.getenv("SCAN_MAX_ROWS", "100"))
    scan_max_columns: int = int(os.getenv("SCAN_MAX_COLUMNS", "26"))

    # Translation
    translate_target_language: str = os.getenv("TRANSLATE_TARGET_LANGUAGE", "en")

    # Runtime environment ('development' or 'production')
    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


class SpreadsheetType(IntEnum):
    """Known spreadsheets, keyed by their numbered environment slot."""

    TODOS = 1


class SpreadsheetConfig(BaseModel):
    """Spreadsheet IDs for one environment, passed explicitly to whoever needs them."""

    model_config = ConfigDict(frozen=True)

    production: bool = False
    ids: dict[int, str] = Field(default_factory=dict)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        production: bool = False,
    ) -> "SpreadsheetConfig":
        """Build from APP_SPREADSHEET_ID_{N}_DEV / APP_SPREADSHEET_ID_{N}_PROD."""
        environ = os.environ if environ is None else environ
        suffix = "PROD" if production else "DEV"
        ids = {}
        for slot in SPREADSHEET_ID_SLOTS:
            value = environ.get(f"APP_SPREADSHEET_ID_{slot}_{suffix}")
            if value and value.strip():
                ids[slot] = value.strip()
        return cls(production=production, ids=ids)

    def get_spreadsheet_id(self, kind: int) -> str:
        """Return the spreadsheet ID for a SpreadsheetType (or raw slot number)."""
        spreadsheet_id = self.ids.get(int(kind))
        if not spreadsheet_id:
            try:
                type_name = SpreadsheetType(kind).name
            except ValueError:
                type_name = str(kind)
            raise InvalidArgumentError(
                f"Spreadsheet ID for type {type_name} ({int(kind)}) is not configured. "
                "Set APP_SPREADSHEET_ID_{N}_DEV/PROD in your environment."
            )
        return spreadsheet_id


settings = Settings()
