"""
Image helpers: turn a rasterized page bitmap into an encoded image for OCR.

Processing steps:
1. Assemble a Pillow RGB image from the raw samples (size must match exactly)
2. Serialize it to PNG bytes
"""

from __future__ import annotations

import io

from PIL import Image

from features.pdf_ocr.domain.entities import PageBitmap
from features.pdf_ocr.domain.errors import EncodeFailed, ImageAssemblyFailed


def assemble_image(bitmap: PageBitmap) -> Image.Image:
    """
    Build an RGB image from a page bitmap.

    A buffer whose length differs from width * height * 3 is rejected instead of
    producing a truncated or garbled image.

    Raises:
        ImageAssemblyFailed: dimensions inconsistent with the pixel buffer
    """
    if bitmap.width <= 0 or bitmap.height <= 0:
        raise ImageAssemblyFailed(bitmap.page_number)
    if len(bitmap.samples) != bitmap.expected_size:
        raise ImageAssemblyFailed(bitmap.page_number)

    try:
        return Image.frombytes("RGB", (bitmap.width, bitmap.height), bitmap.samples)
    except ValueError as e:
        raise ImageAssemblyFailed(bitmap.page_number) from e


def encode_png(image: Image.Image, page_number: int) -> bytes:
    """
    Serialize an image to PNG bytes.

    Raises:
        EncodeFailed: Pillow could not write the image
    """
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeFailed(page_number, str(e)) from e
    return buffer.getvalue()


def bitmap_to_png(bitmap: PageBitmap) -> bytes:
    """Assemble + encode in one call."""
    image = assemble_image(bitmap)
    try:
        return encode_png(image, bitmap.page_number)
    finally:
        image.close()
