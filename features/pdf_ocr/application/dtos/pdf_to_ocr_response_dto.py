"""
DTO for the PDF → OCR response.
"""

from dataclasses import dataclass
from typing import List

from .page_result_dto import PageResultDTO


@dataclass
class PdfToOcrResponseDTO:
    """
    Output of the pipeline. Only built when every page succeeded.
    """

    results: List[PageResultDTO]
    page_count: int
