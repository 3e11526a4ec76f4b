"""sheetschema - infer typed field schemas from Google Sheets header rows."""

__version__ = "0.1.0"
