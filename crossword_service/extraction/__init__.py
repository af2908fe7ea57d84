"""Puzzle extraction from publisher pages."""

from .extractor import (
    ExtractionOutcome,
    ExtractionResult,
    extract_puzzle,
    extract_puzzle_with_outcome,
    select_payload
)
from .patterns import CASCADE, ExtractionPattern, PuzzlePage

__all__ = [
    "ExtractionOutcome",
    "ExtractionResult",
    "extract_puzzle",
    "extract_puzzle_with_outcome",
    "select_payload",
    "CASCADE",
    "ExtractionPattern",
    "PuzzlePage"
]
