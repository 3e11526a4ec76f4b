"""Optional machine translation of header text."""

import logging
from typing import Optional

from ..translate import GoogleTranslateClient

logger = logging.getLogger(__name__)


class HeaderTranslator:
    """Translates headers into the target language, falling back to the originals."""

    def __init__(
        self,
        translate_client: Optional[GoogleTranslateClient],
        target_language: str = "en",
    ):
        self.translate_client = translate_client
        self.target_language = target_language

    async def translate(
        self, headers: list[str], source_language: Optional[str] = None
    ) -> list[str]:
        """
        Return headers translated from ``source_language``.

        Never raises: any failure, an empty response, or a missing entry falls
        back to the original text.
        """
        if not source_language or self.translate_client is None:
            return list(headers)
        if source_language.lower() == self.target_language.lower():
            return list(headers)

        try:
            translations = await self.translate_client.translate_batch(
                list(headers), source_language, self.target_language
            )
        except Exception as e:
            logger.warning(f"Header translation from '{source_language}' failed: {e}")
            return list(headers)

        texts = [(entry or {}).get("translatedText") or "" for entry in translations or []]
        if not any(texts):
            logger.warning(f"Header translation from '{source_language}' returned nothing")
            return list(headers)

        return [
            texts[i] if i < len(texts) and texts[i] else original
            for i, original in enumerate(headers)
        ]
