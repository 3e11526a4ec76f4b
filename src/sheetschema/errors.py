"""sheetschema exception hierarchy."""

from typing import Optional


class SheetSchemaError(Exception):
    """Base exception for all sheetschema errors."""


class InvalidArgumentError(SheetSchemaError):
    """A required input is missing or empty."""


class InvalidFormatError(SheetSchemaError, ValueError):
    """A cell reference or column-letter string is malformed."""


class SheetNotFoundError(SheetSchemaError):
    """The requested sheet title is absent from the spreadsheet metadata."""

    def __init__(self, requested: str, available: list[str], searched: list[str]):
        self.requested = requested
        self.available = available
        self.searched = searched
        super().__init__(
            f"Sheet '{requested}' not found. "
            f"Available sheets: {', '.join(available) or '(none)'}. "
            f"Searched for: {', '.join(searched)}"
        )


class HeaderNotFoundError(SheetSchemaError):
    """The expected header sequence could not be located."""

    def __init__(self, message: str, attempts: Optional[list[str]] = None):
        self.attempts = attempts or []
        if self.attempts:
            message = f"{message} (attempted: {'; '.join(self.attempts)})"
        super().__init__(message)


class SheetsAPIError(SheetSchemaError, RuntimeError):
    """A Google Sheets API call failed."""


class TranslationError(SheetSchemaError, RuntimeError):
    """A Cloud Translation API call failed."""
