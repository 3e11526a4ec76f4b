"""Cloud Translation (v2) API client."""

import asyncio
import logging
from typing import Optional

from google.auth.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..config import Settings, settings as default_settings
from ..credentials import load_credentials
from ..errors import TranslationError

logger = logging.getLogger(__name__)


class GoogleTranslateClient:
    """Client for batch text translation."""

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
        """Get or create the Translation API service."""
        if self._service is None:
            if self._credentials is None:
                self._credentials = load_credentials(self.settings)
            self._service = build(
                "translate", "v2", credentials=self._credentials, cache_discovery=False
            )
        return self._service

    def translate(self, texts: list[str], source: str, target: str = "en") -> list[dict]:
        """
        Translate a batch of strings.

        Returns the raw translation entries (``{"translatedText": ...}``), which
        may be fewer than the inputs.
        """
        logger.debug(f"Translating {len(texts)} strings from {source} to {target}")
        try:
            result = (
                self.service.translations()
                .list(q=texts, source=source, target=target, format="text")
                .execute()
            )
        except HttpError as e:
            raise TranslationError(f"Translation request failed: {e}") from e
        return result.get("translations", [])

    async def translate_batch(
        self, texts: list[str], source: str, target: str = "en"
    ) -> list[dict]:
        return await asyncio.to_thread(self.translate, texts, source, target)
