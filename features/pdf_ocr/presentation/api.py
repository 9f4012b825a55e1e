"""
FastAPI routes for the PDF → OCR feature.

Feature: synchronous "download + rasterize + OCR" for a PDF at a remote URL.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from features.pdf_ocr.application.dtos import PdfToOcrRequestDTO, PdfToOcrResponseDTO
from features.pdf_ocr.application.use_cases import PdfToOcrUseCase
from features.pdf_ocr.infrastructure.http_fetcher_requests import RequestsDocumentFetcher
from features.pdf_ocr.infrastructure.ocr_engine_tesseract import TesseractOcrEngine
from features.pdf_ocr.infrastructure.pdf_renderer_pymupdf import PyMuPdfRenderer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ocr"])


class PdfToOcrRequest(BaseModel):
    url: str


class OcrText(BaseModel):
    text: str


class PageOcrResult(BaseModel):
    """OCR output for one page (page is 1-based)."""
    page: int
    ocr_result: OcrText


class PdfToOcrResponse(BaseModel):
    results: list[PageOcrResult]
    page_count: int


class ErrorResponse(BaseModel):
    error: str


def build_pdf_to_ocr_use_case() -> PdfToOcrUseCase:
    """Build the use case with requests + PyMuPDF + Tesseract adapters."""
    return PdfToOcrUseCase(
        fetcher=RequestsDocumentFetcher(),
        renderer=PyMuPdfRenderer(),
        ocr_engine=TesseractOcrEngine(),
    )


@router.post(
    "/pdf_to_ocr",
    response_model=PdfToOcrResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def pdf_to_ocr(
    request: PdfToOcrRequest,
    use_case: PdfToOcrUseCase = Depends(build_pdf_to_ocr_use_case),
) -> PdfToOcrResponse:
    """
    Download a PDF and OCR every page.

    Pipeline:
    1. Download the PDF from `url`
    2. Rasterize each page at 2x scale (RGB)
    3. OCR each page image (Tesseract, Portuguese, PSM 6, OEM 3)
    4. Strip control characters and surrounding whitespace

    Errors (PdfOcrError) propagate to the app-level handler, which renders
    `{"error": "..."}` with 400 (input) or 500 (processing). No partial results.
    """
    logger.info(f"pdf_to_ocr: Request received for {request.url}")

    dto_out: PdfToOcrResponseDTO = use_case.execute(PdfToOcrRequestDTO(url=request.url))

    return PdfToOcrResponse(
        results=[
            PageOcrResult(page=r.page_number, ocr_result=OcrText(text=r.text))
            for r in dto_out.results
        ],
        page_count=dto_out.page_count,
    )
