"""Google API credential loading."""

import json
import logging
from pathlib import Path
from typing import Optional

import google.auth
from google.auth.credentials import Credentials
from google.auth.transport.requests import Request
from google.oauth2 import credentials as user_credentials
from google.oauth2 import service_account

from .config import Settings

logger = logging.getLogger(__name__)

SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets.readonly"
TRANSLATE_SCOPE = "https://www.googleapis.com/auth/cloud-translation"
SCOPES = [SHEETS_SCOPE, TRANSLATE_SCOPE]


def _from_file(path: Path, scopes: list[str]) -> Credentials:
    with open(path) as fh:
        info = json.load(fh)
    if info.get("type") == "service_account":
        return service_account.Credentials.from_service_account_info(info, scopes=scopes)
    return user_credentials.Credentials.from_authorized_user_info(info, scopes)


def load_credentials(settings: Settings, scopes: Optional[list[str]] = None) -> Credentials:
    """
    Load credentials for the Sheets and Translation APIs.

    Order: GOOGLE_TOKEN_PATH, then GOOGLE_CREDENTIALS_PATH, then Application
    Default Credentials.
    """
    scopes = scopes or SCOPES

    for path in (settings.google_token_path, settings.google_credentials_path):
        if path is not None and path.exists():
            logger.debug(f"Loading Google credentials from {path}")
            creds = _from_file(path, scopes)
            if getattr(creds, "expired", False) and getattr(creds, "refresh_token", None):
                creds.refresh(Request())
            return creds

    creds, project = google.auth.default(scopes=scopes)
    logger.debug(f"Using application default credentials (project: {project})")
    return creds
