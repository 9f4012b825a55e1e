"""
PDF renderer backed by PyMuPDF.

  - open(): parse raw bytes as PDF (filetype forced, no content sniffing)
  - rasterize_page(): load one page and render it with a scale matrix into an
    RGB pixmap without alpha

Errors are mapped to the domain taxonomy with the 1-based page number.
"""

from __future__ import annotations

import logging

import fitz  # PyMuPDF

from features.pdf_ocr.domain.entities import PageBitmap, RasterConfig
from features.pdf_ocr.domain.errors import DecodeFailed, PageLoadFailed, RasterizeFailed
from features.pdf_ocr.domain.interfaces import IPdfDocument, IPdfRenderer

logger = logging.getLogger(__name__)


_COLORSPACES = {
    "rgb": fitz.csRGB,
}


class PyMuPdfDocument(IPdfDocument):
    """Document handle wrapping a fitz.Document."""

    def __init__(self, doc: fitz.Document):
        self._doc = doc

    def page_count(self) -> int:
        return self._doc.page_count

    def rasterize_page(self, index: int, config: RasterConfig) -> PageBitmap:
        page_number = index + 1

        try:
            page = self._doc.load_page(index)
        except Exception as e:
            raise PageLoadFailed(page_number, str(e)) from e

        matrix = fitz.Matrix(config.scale_x, 0.0, 0.0, config.scale_y, 0.0, 0.0)
        colorspace = _COLORSPACES[config.colorspace]

        try:
            pix = page.get_pixmap(matrix=matrix, colorspace=colorspace, alpha=config.alpha)
        except Exception as e:
            raise RasterizeFailed(page_number, str(e)) from e

        bitmap = PageBitmap(
            page_number=page_number,
            width=pix.width,
            height=pix.height,
            samples=pix.samples,
        )
        logger.debug(
            f"rasterize_page: Page {page_number} -> {bitmap.width}x{bitmap.height} "
            f"({len(bitmap.samples)} bytes)"
        )
        return bitmap

    def close(self) -> None:
        if not self._doc.is_closed:
            self._doc.close()


class PyMuPdfRenderer(IPdfRenderer):
    """Open PDF bytes with PyMuPDF."""

    def open(self, data: bytes) -> PyMuPdfDocument:
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise DecodeFailed(str(e)) from e

        # PyMuPDF sniffs the content and opens images/HTML despite filetype="pdf"
        if not doc.is_pdf:
            detail = "conteúdo não é um documento PDF"
            doc.close()
            raise DecodeFailed(detail)

        logger.debug(f"open: Parsed PDF with {doc.page_count} pages")
        return PyMuPdfDocument(doc)
