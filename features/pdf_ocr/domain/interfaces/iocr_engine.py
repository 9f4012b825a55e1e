"""
Interface for recognizing text in an encoded image.
"""

from abc import ABC, abstractmethod


class IOcrEngine(ABC):
    """Port for OCR over one encoded page image."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> str:
        """
        Return the raw recognized text (no normalization applied).

        Implementations raise any exception on failure; the orchestrator
        attaches the page number and reports it as OcrFailed.
        """
        raise NotImplementedError
