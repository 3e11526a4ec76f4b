"""Cloud Translation API integration."""

from .client import GoogleTranslateClient

__all__ = ["GoogleTranslateClient"]
