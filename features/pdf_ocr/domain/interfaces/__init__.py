"""
Domain interfaces (ports) for the PDF → OCR feature.

Following clean architecture principles:
- Domain defines interfaces (ports)
- Infrastructure implements interfaces (adapters)
- Application orchestrates via interfaces

Each interface is defined in its own file for better organization.
"""

from .idocument_fetcher import IDocumentFetcher
from .iocr_engine import IOcrEngine
from .ipdf_renderer import IPdfDocument, IPdfRenderer

__all__ = ["IDocumentFetcher", "IOcrEngine", "IPdfDocument", "IPdfRenderer"]
