"""Publisher page fetching for the Crossword Retrieval Service."""

from .base import BasePageFetcher
from .guardian_client import GuardianPageFetcher

__all__ = ["BasePageFetcher", "GuardianPageFetcher"]
