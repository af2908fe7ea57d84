"""Exceptions raised by the Crossword Retrieval Service."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models.puzzles import RetrievalResult


class TransportError(Exception):
    """A page request failed for a reason other than 404."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class PuzzleNotFoundError(Exception):
    """Every candidate edition number was tried without finding a puzzle."""

    def __init__(self, result: "RetrievalResult"):
        super().__init__(result.error_message)
        self.result = result
