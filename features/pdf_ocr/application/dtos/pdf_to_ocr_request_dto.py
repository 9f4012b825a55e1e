"""
DTO for the PDF → OCR request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PdfToOcrRequestDTO:
    """Location of the remote PDF to process."""

    url: str
