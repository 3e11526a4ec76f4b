"""Derive lowerCamelCase identifiers from free-form header text."""

import re

_SEPARATORS = re.compile(r"[^a-zA-Z0-9]+")


def to_identifier(text: str, fallback: str) -> str:
    """
    Convert header text into a lowerCamelCase identifier.

    Every run of characters outside ASCII letters and digits acts as a word
    separator. Text with no usable characters yields ``fallback`` unchanged.

        >>> to_identifier("Received Date", "field1")
        'receivedDate'
        >>> to_identifier("日本 語", "field1")
        'field1'
    """
    parts = [part for part in _SEPARATORS.split(text.strip()) if part]
    if not parts:
        return fallback
    head, *rest = parts
    return head.lower() + "".join(part[0].upper() + part[1:].lower() for part in rest)
