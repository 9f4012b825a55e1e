"""
DTO for the OCR result of a single page.
"""

from dataclasses import dataclass


@dataclass
class PageResultDTO:
    page_number: int  # 1-based, contiguous within one response
    text: str  # normalized OCR text
