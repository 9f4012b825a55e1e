"""
Interfaces for opening a PDF and rasterizing its pages.

The renderer is a black-box capability: any engine that can open PDF bytes,
report a page count and rasterize a page by index can be plugged in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from features.pdf_ocr.domain.entities import PageBitmap, RasterConfig


class IPdfDocument(ABC):
    """
    Opened document handle.

    Owns the parser state; must be closed when the request ends, which the
    context-manager protocol guarantees on every exit path.
    """

    @abstractmethod
    def page_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def rasterize_page(self, index: int, config: RasterConfig) -> PageBitmap:
        """
        Load page `index` (0-based) and render it to an RGB bitmap.

        Raises:
            PageLoadFailed: index out of range or corrupt page
            RasterizeFailed: rendering engine internal error
        """
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError

    def __enter__(self) -> "IPdfDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class IPdfRenderer(ABC):
    """Port for parsing raw bytes into a document handle."""

    @abstractmethod
    def open(self, data: bytes) -> IPdfDocument:
        """
        Parse `data` as a PDF (the format is never auto-detected).

        Raises:
            DecodeFailed: bytes are not a parseable PDF
        """
        raise NotImplementedError
