"""Abstract base for publisher page fetchers."""

from abc import ABC, abstractmethod
from typing import Optional


class BasePageFetcher(ABC):
    """Fetches one puzzle page per (type, edition number)."""

    @abstractmethod
    def build_url(self, puzzle_type: str, number: int) -> str:
        """Return the page URL for one edition of a puzzle type."""
        ...

    @abstractmethod
    def fetch_url(self, url: str) -> Optional[str]:
        """
        Fetch a page.

        Returns:
            The page HTML, or None if the publisher has no page at this URL.

        Raises:
            TransportError: On any other HTTP or network failure.
        """
        ...
