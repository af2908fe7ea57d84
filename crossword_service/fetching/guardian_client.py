"""HTTP client for Guardian crossword pages."""

import logging
from typing import Dict, Optional

import requests

from ..config import settings
from ..exceptions import TransportError
from .base import BasePageFetcher

logger = logging.getLogger(__name__)


class GuardianPageFetcher(BasePageFetcher):
    """Fetches crossword pages with browser-like headers."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """Initialize the HTTP session."""
        self.base_url = (base_url or settings.guardian_base_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update(self.default_headers())

    @staticmethod
    def default_headers() -> Dict[str, str]:
        """Headers the publisher expects from a real browser."""
        return {
            "User-Agent": settings.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
            "Accept-Language": "en-GB,en;q=0.9,en-US;q=0.8",
            "Referer": settings.guardian_referer,
        }

    def build_url(self, puzzle_type: str, number: int) -> str:
        return f"{self.base_url}/{puzzle_type}/{number}"

    def fetch_url(self, url: str) -> Optional[str]:
        logger.info(f"Trying: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e

        if response.status_code == 404:
            logger.info(f"Not found: {url}")
            return None
        if not response.ok:
            logger.warning(f"HTTP {response.status_code} from {url}")
            raise TransportError(f"HTTP {response.status_code}", status_code=response.status_code)

        # requests falls back to ISO-8859-1 for text/* without a charset
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
