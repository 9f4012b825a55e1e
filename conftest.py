"""
Shared pytest fixtures: fake engines implementing the domain interfaces and
in-memory PDF generation with PyMuPDF.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Callable, List, Optional, Union

import fitz  # PyMuPDF
import pytest

from features.pdf_ocr.application.use_cases import PdfToOcrUseCase
from features.pdf_ocr.domain.entities import PageBitmap, RasterConfig
from features.pdf_ocr.domain.interfaces import (
    IDocumentFetcher,
    IOcrEngine,
    IPdfDocument,
    IPdfRenderer,
)


def make_bitmap(page_number: int, width: int = 4, height: int = 3) -> PageBitmap:
    """White RGB bitmap with a consistent buffer."""
    return PageBitmap(
        page_number=page_number,
        width=width,
        height=height,
        samples=b"\xff" * (width * height * 3),
    )


class FakeFetcher(IDocumentFetcher):
    def __init__(self, data: bytes = b"%PDF-fake", error: Optional[Exception] = None):
        self.data = data
        self.error = error
        self.calls: List[str] = []

    def fetch(self, url: str) -> bytes:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.data


class FakeDocument(IPdfDocument):
    def __init__(self, pages: List[Union[PageBitmap, Exception]]):
        self.pages = pages
        self.closed = False
        self.rasterized: List[int] = []

    def page_count(self) -> int:
        return len(self.pages)

    def rasterize_page(self, index: int, config: RasterConfig) -> PageBitmap:
        self.rasterized.append(index)
        page = self.pages[index]
        if isinstance(page, Exception):
            raise page
        return page

    def close(self) -> None:
        self.closed = True


class FakeRenderer(IPdfRenderer):
    def __init__(self, document: FakeDocument, error: Optional[Exception] = None):
        self.document = document
        self.error = error
        self.opened: List[bytes] = []

    def open(self, data: bytes) -> FakeDocument:
        self.opened.append(data)
        if self.error is not None:
            raise self.error
        return self.document


class FakeOcrEngine(IOcrEngine):
    def __init__(self, recognize: Callable[[int], str]):
        self._recognize = recognize
        self.calls = 0

    def recognize(self, image_bytes: bytes) -> str:
        self.calls += 1
        # PNG signature: the engine always receives an encoded image
        assert image_bytes.startswith(b"\x89PNG")
        return self._recognize(self.calls)


@pytest.fixture
def build_use_case():
    """
    Factory returning (use_case, fakes).

    Args accepted by the factory:
        pages: list of PageBitmap or Exception (raised when rasterizing that page)
        fetch_error / open_error: exceptions raised by fetcher / renderer
        ocr: callable(call_number) -> raw text, may raise
    """

    def _build(
        pages: Optional[List[Union[PageBitmap, Exception]]] = None,
        fetch_error: Optional[Exception] = None,
        open_error: Optional[Exception] = None,
        ocr: Optional[Callable[[int], str]] = None,
    ):
        if pages is None:
            pages = [make_bitmap(1)]
        fetcher = FakeFetcher(error=fetch_error)
        document = FakeDocument(pages)
        renderer = FakeRenderer(document, error=open_error)
        engine = FakeOcrEngine(ocr or (lambda n: f"  texto da página {n}\n"))
        use_case = PdfToOcrUseCase(fetcher=fetcher, renderer=renderer, ocr_engine=engine)
        return use_case, SimpleNamespace(
            fetcher=fetcher, document=document, renderer=renderer, engine=engine
        )

    return _build


@pytest.fixture
def make_pdf():
    """Factory producing PDF bytes with `page_count` blank pages of the given size (points)."""

    def _make(page_count: int = 1, width: float = 100, height: float = 50, texts: Optional[List[str]] = None) -> bytes:
        doc = fitz.open()
        try:
            for i in range(page_count):
                page = doc.new_page(width=width, height=height)
                if texts and i < len(texts):
                    page.insert_text((10, 30), texts[i])
            return doc.tobytes()
        finally:
            doc.close()

    return _make
