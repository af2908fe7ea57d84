"""Data models for the Crossword Retrieval Service."""

from .puzzle_types import (
    Cadence,
    PuzzleType,
    PuzzleTypeConfig,
    PUZZLE_TYPES,
    DEFAULT_PUZZLE_TYPE,
    get_puzzle_type_config,
    list_puzzle_types
)
from .puzzles import (
    AttemptOutcome,
    Entry,
    PuzzleRecord,
    RetrievalAttempt,
    RetrievalResult
)

__all__ = [
    "Cadence",
    "PuzzleType",
    "PuzzleTypeConfig",
    "PUZZLE_TYPES",
    "DEFAULT_PUZZLE_TYPE",
    "get_puzzle_type_config",
    "list_puzzle_types",
    "AttemptOutcome",
    "Entry",
    "PuzzleRecord",
    "RetrievalAttempt",
    "RetrievalResult"
]
