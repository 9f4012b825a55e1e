"""
Domain errors for the PDF → OCR feature.

Two families:
  - InputError (4xx): the failure is attributed to caller-supplied input
    (request body, URL, remote response).
  - ProcessingError (5xx): decoding, rasterizing, image assembly, encoding or OCR
    failed. Decode failures stay here even when caused by a bad document.

The first error raised at any stage aborts the whole request; nothing is retried.
"""

from __future__ import annotations

from typing import Optional


class PdfOcrError(Exception):
    """Base error carrying the wire message, HTTP status and originating stage."""

    status_code: int = 500
    stage: str = "unknown"

    def __init__(self, message: str, page_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.page_number = page_number


# ==================== Input errors (400) ====================


class InputError(PdfOcrError):
    status_code = 400


class InvalidRequestBody(InputError):
    stage = "request"

    def __init__(self) -> None:
        super().__init__("JSON inválido ou ausente")


class FetchFailed(InputError):
    stage = "fetch"

    def __init__(self, detail: str):
        super().__init__(f"Falha ao baixar PDF: {detail}")


class ResponseReadFailed(InputError):
    stage = "fetch"

    def __init__(self, detail: str):
        super().__init__(f"Erro ao ler resposta: {detail}")


# ==================== Processing errors (500) ====================


class ProcessingError(PdfOcrError):
    status_code = 500


class DecodeFailed(ProcessingError):
    stage = "open"

    def __init__(self, detail: str):
        super().__init__(f"Não foi possível carregar o PDF: {detail}")


class PageLoadFailed(ProcessingError):
    stage = "load_page"

    def __init__(self, page_number: int, detail: str):
        super().__init__(f"Erro ao carregar página {page_number}: {detail}", page_number)


class RasterizeFailed(ProcessingError):
    stage = "rasterize"

    def __init__(self, page_number: int, detail: str):
        super().__init__(f"Erro ao gerar pixmap da página {page_number}: {detail}", page_number)


class ImageAssemblyFailed(ProcessingError):
    stage = "assemble"

    def __init__(self, page_number: int):
        super().__init__(f"Falha ao criar imagem da página {page_number}", page_number)


class EncodeFailed(ProcessingError):
    stage = "encode"

    def __init__(self, page_number: int, detail: str):
        super().__init__(f"Erro ao salvar imagem da página {page_number}: {detail}", page_number)


class OcrFailed(ProcessingError):
    stage = "ocr"

    def __init__(self, page_number: int, detail: str):
        super().__init__(f"Erro ao processar OCR (página {page_number}): {detail}", page_number)
