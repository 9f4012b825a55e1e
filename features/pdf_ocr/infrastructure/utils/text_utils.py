"""
Text utilities for OCR output.
"""

from __future__ import annotations

import unicodedata
from typing import Optional


def clean_ocr_text(text: Optional[str]) -> str:
    """
    Normalize raw OCR output.

    1. Remove Unicode control characters (category Cc, line breaks and tabs included)
    2. Trim leading/trailing whitespace

    Idempotent: cleaning already-cleaned text returns it unchanged.

    Args:
        text: Raw text returned by the OCR engine

    Returns:
        Cleaned text (empty string for empty/None input)
    """
    if not text:
        return ""

    text = "".join(ch for ch in text if unicodedata.category(ch) != "Cc")

    return text.strip()
