"""
Application use cases for the PDF → OCR feature.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List

from features.pdf_ocr.domain.entities import RasterConfig
from features.pdf_ocr.domain.errors import (
    DecodeFailed,
    FetchFailed,
    OcrFailed,
    PdfOcrError,
    RasterizeFailed,
)
from features.pdf_ocr.domain.interfaces import IDocumentFetcher, IOcrEngine, IPdfDocument, IPdfRenderer
from features.pdf_ocr.infrastructure.utils.image_utils import bitmap_to_png
from features.pdf_ocr.infrastructure.utils.text_utils import clean_ocr_text
from .dtos import PageResultDTO, PdfToOcrRequestDTO, PdfToOcrResponseDTO

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


@dataclass
class PdfToOcrUseCase:
    """
    Download a PDF, rasterize every page and OCR it.

    Pipeline:
    1. Fetch: download the raw bytes (once)
    2. Open: parse the bytes as a PDF document
    3. For each page, in ascending order:
       rasterize → assemble/encode PNG → OCR → normalize text
    4. Aggregate page results + page count

    The first failure at any stage aborts the request: no retries, no skipped
    pages, no partial results. The document handle is closed on every path.

    Follows clean architecture: depends on domain interfaces, not on concrete engines.
    """

    fetcher: IDocumentFetcher
    renderer: IPdfRenderer
    ocr_engine: IOcrEngine
    raster_config: RasterConfig = field(default_factory=RasterConfig)

    def execute(self, request: PdfToOcrRequestDTO) -> PdfToOcrResponseDTO:
        # Stage 1: fetch
        download_start = time.perf_counter()
        try:
            pdf_data = self.fetcher.fetch(request.url)
        except PdfOcrError:
            raise
        except Exception as e:
            raise FetchFailed(str(e)) from e
        logger.info(f"execute: PDF download time: {_elapsed_ms(download_start)}ms ({len(pdf_data)} bytes)")

        # Stage 2: open
        try:
            document = self.renderer.open(pdf_data)
        except PdfOcrError:
            raise
        except Exception as e:
            raise DecodeFailed(str(e)) from e
        finally:
            # The handle owns what it needs from here on
            del pdf_data

        # Stage 3: pages
        with document:
            page_count = document.page_count()
            logger.info(f"execute: Processing {page_count} pages")

            results: List[PageResultDTO] = []
            total_start = time.perf_counter()

            for page_index in range(page_count):
                results.append(self._process_page(document, page_index))

            logger.info(
                f"execute: Total processing time (all pages): {_elapsed_ms(total_start)}ms"
            )

        return PdfToOcrResponseDTO(results=results, page_count=page_count)

    def _process_page(self, document: IPdfDocument, page_index: int) -> PageResultDTO:
        page_number = page_index + 1
        page_start = time.perf_counter()

        # Rasterize + assemble + encode
        image_start = time.perf_counter()
        try:
            bitmap = document.rasterize_page(page_index, self.raster_config)
        except PdfOcrError:
            raise
        except Exception as e:
            raise RasterizeFailed(page_number, str(e)) from e

        image_bytes = bitmap_to_png(bitmap)
        del bitmap
        image_ms = _elapsed_ms(image_start)

        # OCR + normalize
        ocr_start = time.perf_counter()
        try:
            raw_text = self.ocr_engine.recognize(image_bytes)
        except PdfOcrError:
            raise
        except Exception as e:
            raise OcrFailed(page_number, str(e)) from e
        text = clean_ocr_text(raw_text)
        ocr_ms = _elapsed_ms(ocr_start)

        logger.info(f"_process_page: Page {page_number}: image extraction {image_ms}ms, OCR {ocr_ms}ms")
        logger.info(f"_process_page: Page {page_number}: total processing time {_elapsed_ms(page_start)}ms")

        return PageResultDTO(page_number=page_number, text=text)
