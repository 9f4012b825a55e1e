"""
DTOs (Data Transfer Objects) used by the PDF → OCR use case and API.

Following clean architecture principles:
- DTOs are organized by feature/domain
- Each DTO is in its own file for better organization
"""

from .pdf_to_ocr_request_dto import PdfToOcrRequestDTO
from .page_result_dto import PageResultDTO
from .pdf_to_ocr_response_dto import PdfToOcrResponseDTO

__all__ = [
    "PdfToOcrRequestDTO",
    "PageResultDTO",
    "PdfToOcrResponseDTO",
]
