"""
Document fetcher backed by `requests`.

The download happens in two steps so that transport failures and body-read
failures are reported separately:
  1. GET with stream=True (connect, send, status line + headers)
  2. Read the full body
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from features.pdf_ocr.domain.errors import FetchFailed, ResponseReadFailed
from features.pdf_ocr.domain.interfaces import IDocumentFetcher

logger = logging.getLogger(__name__)


class RequestsDocumentFetcher(IDocumentFetcher):
    """
    Fetch a remote document over HTTP(S).

    Args:
        timeout: Optional (connect, read) timeout in seconds. None = wait forever.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def fetch(self, url: str) -> bytes:
        logger.debug(f"fetch: GET {url}")

        try:
            response = requests.get(url, stream=True, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise FetchFailed(str(e)) from e

        with response:
            try:
                response.raise_for_status()
            except requests.exceptions.HTTPError as e:
                raise FetchFailed(str(e)) from e

            try:
                data = response.content
            except requests.exceptions.RequestException as e:
                raise ResponseReadFailed(str(e)) from e

        logger.debug(f"fetch: Downloaded {len(data)} bytes (status={response.status_code})")
        return data
