"""
OCR engine backed by Tesseract (via pytesseract).

Uses a fixed OcrConfig profile (Portuguese, 300 DPI hint, PSM 6, OEM 3).

Note:
    PSM modes:
    - 3: Fully automatic page segmentation (default)
    - 6: Assume a uniform block of text (used here)
    OEM modes:
    - 1: LSTM neural net only
    - 3: Default, based on what is available (legacy + LSTM)
"""

from __future__ import annotations

import io
import logging
import time
from typing import Optional

import pytesseract
from PIL import Image

from features.pdf_ocr.domain.entities import OcrConfig
from features.pdf_ocr.domain.interfaces import IOcrEngine

logger = logging.getLogger(__name__)


class TesseractOcrEngine(IOcrEngine):
    """
    Recognize text in a PNG page image.

    Args:
        config: OCR profile; defaults to OcrConfig()
    """

    def __init__(self, config: Optional[OcrConfig] = None):
        self.config = config or OcrConfig()

    def recognize(self, image_bytes: bytes) -> str:
        start = time.perf_counter()

        with Image.open(io.BytesIO(image_bytes)) as img:
            text = pytesseract.image_to_string(
                img,
                lang=self.config.language,
                config=self.config.to_tesseract_config(),
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"recognize: OCR finished in {duration_ms:.0f}ms ({len(text)} chars)")
        return text
