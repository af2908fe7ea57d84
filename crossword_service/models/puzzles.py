"""Puzzle data models for the Crossword Retrieval Service."""

import copy
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class AttemptOutcome(str, Enum):
    """Outcome of trying one edition number."""
    SUCCESS = "success"
    NOT_FOUND = "not-found"                # publisher returned 404
    TRANSPORT_ERROR = "transport-error"    # any other HTTP or network failure
    PARSE_ERROR = "parse-error"            # a pattern matched but the payload would not parse
    EXTRACTION_EMPTY = "extraction-empty"  # payload parsed but had no entries
    NO_PUZZLE = "no-puzzle"                # no pattern matched the page


class Entry(BaseModel):
    """Display view of a single clue/answer slot in the grid.

    Fields are untyped: whatever the publisher sends is shown as is. Anything
    else (solution, group, separatorLocations, ...) is kept as an extra field.
    """

    id: Any = Field(None, description="Publisher entry id, e.g. '1-across'")
    number: Any = Field(None, description="Clue number")
    direction: Any = Field(None, description="'across' or 'down'")
    clue: Any = Field(None, description="Clue text")
    length: Any = Field(None, description="Answer length")
    position: Any = Field(None, description="Grid position of the first cell, e.g. {'x': 0, 'y': 0}")

    model_config = ConfigDict(extra="allow")


class PuzzleRecord(BaseModel):
    """A crossword as published, with at least one entry.

    A non-empty ``entries`` list is the only requirement. Entries and the
    publisher metadata (id, number, name, creator, date, dimensions, ...) are
    passed through untouched.
    """

    entries: List[Any] = Field(..., min_length=1, description="Grid entries in publisher order")

    model_config = ConfigDict(extra="allow")

    # Payload as decoded from the page, returned verbatim by to_payload()
    _source: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "PuzzleRecord":
        """Validate a decoded publisher payload into a record."""
        record = cls.model_validate(payload)
        record._source = copy.deepcopy(payload)
        return record

    def to_payload(self) -> Dict[str, Any]:
        """Serialize back to exactly the fields the publisher supplied."""
        if self._source is not None:
            return copy.deepcopy(self._source)
        return self.model_dump(mode="json", exclude_unset=True)

    @property
    def typed_entries(self) -> List[Entry]:
        """Entries as Entry views; entries that are not objects become empty views."""
        return [
            Entry.model_validate(entry) if isinstance(entry, dict) else Entry()
            for entry in self.entries
        ]

    @property
    def edition_number(self) -> Optional[int]:
        """Edition number as reported by the publisher, if present."""
        number = (self.model_extra or {}).get("number")
        try:
            return int(number) if number is not None else None
        except (TypeError, ValueError):
            return None


class RetrievalAttempt(BaseModel):
    """One edition number tried during a search."""

    number: int = Field(..., description="Edition number tried")
    outcome: AttemptOutcome = Field(..., description="What happened")
    error: Optional[str] = Field(None, description="Error text recorded for this attempt")
    url: Optional[str] = Field(None, description="Page URL requested")

    model_config = ConfigDict(use_enum_values=True)


class RetrievalResult(BaseModel):
    """Outcome of a full search: a record, or the diagnostics of every miss."""

    puzzle_type: str = Field(..., description="Requested puzzle type")
    success: bool = Field(..., description="Whether a valid record was found")
    record: Optional[PuzzleRecord] = Field(None, description="The puzzle, on success")
    start_number: int = Field(..., description="First edition number tried")
    estimated: bool = Field(..., description="Whether start_number came from the estimator")
    attempts: List[RetrievalAttempt] = Field(default_factory=list, description="Attempts in order")
    last_error: Optional[str] = Field(None, description="Last error text recorded")

    @property
    def tried_numbers(self) -> List[int]:
        """Edition numbers tried, in order."""
        return [attempt.number for attempt in self.attempts]

    @property
    def error_message(self) -> Optional[str]:
        """Human-readable failure message, or None on success."""
        if self.success:
            return None
        tried = ", ".join(str(number) for number in self.tried_numbers)
        return (
            f"Could not find a valid {self.puzzle_type} puzzle. "
            f"Tried: {tried}. Last error: {self.last_error or 'unknown'}"
        )

    def raise_for_failure(self) -> PuzzleRecord:
        """Return the record, or raise PuzzleNotFoundError if the search was exhausted."""
        from ..exceptions import PuzzleNotFoundError

        if not self.success or self.record is None:
            raise PuzzleNotFoundError(self)
        return self.record
