"""Common utilities for the race brief pipeline."""

import unicodedata


def clean_text(text: str | None, *, normalize: bool = True) -> str:
    """Remove BOM markers and surrounding whitespace, optionally NFKC-normalizing.

    Args:
        text: Input text that may contain BOM or replacement characters.
        normalize: Whether to apply NFKC normalization.

    Returns:
        Cleaned text; empty string for empty input.
    """
    if not text:
        return ""

    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    if normalize:
        cleaned = unicodedata.normalize("NFKC", cleaned)
    return cleaned.strip()
