"""
Interface for retrieving raw document bytes from a remote location.

Infrastructure adapters (e.g., RequestsDocumentFetcher) implement this interface.
"""

from abc import ABC, abstractmethod


class IDocumentFetcher(ABC):
    """Port for downloading a document."""

    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """
        Retrieve the complete byte content behind `url`.

        Raises:
            FetchFailed: transport error, malformed URL or non-success status
            ResponseReadFailed: the response body could not be read
        """
        raise NotImplementedError
