"""Extract a crossword record from a raw puzzle page."""

import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, Field

from ..models.puzzles import PuzzleRecord
from .patterns import CASCADE, ExtractionPattern, PuzzlePage

logger = logging.getLogger(__name__)


class ExtractionOutcome(str, Enum):
    """Why extraction did or did not produce a record."""
    FOUND = "found"
    EMPTY = "empty"              # a payload parsed but carried no entries
    PARSE_ERROR = "parse_error"  # a pattern matched but its payload was unreadable
    NO_MATCH = "no_match"        # no pattern matched the page


# Higher wins when reporting why the whole cascade failed
_FAILURE_RANK = {
    ExtractionOutcome.NO_MATCH: 0,
    ExtractionOutcome.PARSE_ERROR: 1,
    ExtractionOutcome.EMPTY: 2,
}


class ExtractionResult(BaseModel):
    """Record found in a page, plus which pattern produced it."""

    record: Optional[PuzzleRecord] = Field(None, description="Extracted puzzle, if any")
    outcome: ExtractionOutcome = Field(..., description="Overall extraction outcome")
    pattern: Optional[str] = Field(None, description="Name of the pattern that matched")


def _has_entries(obj: Any) -> bool:
    if not isinstance(obj, dict):
        return False
    entries = obj.get("entries")
    return isinstance(entries, list) and len(entries) > 0


def select_payload(parsed: Any) -> Optional[Dict[str, Any]]:
    """Pick the object holding the entries: a wrapper's ``data`` field, or the object itself."""
    if isinstance(parsed, dict):
        data = parsed.get("data")
        if _has_entries(data):
            return data
        if _has_entries(parsed):
            return parsed
    return None


def _try_candidate(
    pattern: ExtractionPattern,
    raw: str,
    puzzle_type: Optional[str]
) -> Tuple[Optional[PuzzleRecord], ExtractionOutcome]:
    try:
        parsed = json.loads(raw)
    except ValueError as e:
        logger.debug(f"{pattern.name} matched but JSON parse failed ({puzzle_type}): {e}")
        return None, ExtractionOutcome.PARSE_ERROR

    payload = select_payload(parsed)
    if payload is None:
        logger.debug(f"{pattern.name} matched but payload has no entries ({puzzle_type})")
        return None, ExtractionOutcome.EMPTY

    try:
        record = PuzzleRecord.from_payload(payload)
    except (ValueError, TypeError) as e:
        logger.debug(f"{pattern.name} payload failed validation ({puzzle_type}): {e}")
        return None, ExtractionOutcome.PARSE_ERROR

    return record, ExtractionOutcome.FOUND


def _worse(current: ExtractionOutcome, outcome: ExtractionOutcome) -> ExtractionOutcome:
    return outcome if _FAILURE_RANK[outcome] > _FAILURE_RANK[current] else current


def _try_pattern(
    pattern: ExtractionPattern,
    page: PuzzlePage,
    puzzle_type: Optional[str]
) -> Tuple[Optional[PuzzleRecord], ExtractionOutcome]:
    failure = ExtractionOutcome.NO_MATCH
    for raw in pattern(page):
        record, outcome = _try_candidate(pattern, raw, puzzle_type)
        if record is not None:
            return record, outcome
        failure = _worse(failure, outcome)
    return None, failure


def extract_puzzle_with_outcome(
    page: Union[str, bytes, None],
    puzzle_type: Optional[str] = None,
    patterns: Optional[List[ExtractionPattern]] = None
) -> ExtractionResult:
    """Run the pattern cascade over a page and report what happened.

    Patterns are tried in order, each over every match it finds, and the first
    one yielding a record with a non-empty ``entries`` list wins. A match that
    fails to parse never stops the cascade. This function does not raise for
    any input.
    """
    if page is None:
        return ExtractionResult(outcome=ExtractionOutcome.NO_MATCH)
    if isinstance(page, bytes):
        page = page.decode("utf-8", errors="replace")

    parsed_page = PuzzlePage(page)
    failure = ExtractionOutcome.NO_MATCH
    for pattern in patterns if patterns is not None else CASCADE:
        record, outcome = _try_pattern(pattern, parsed_page, puzzle_type)
        if record is not None:
            logger.debug(f"Extracted {len(record.entries)} entries via {pattern.name} ({puzzle_type})")
            return ExtractionResult(record=record, outcome=outcome, pattern=pattern.name)
        failure = _worse(failure, outcome)

    return ExtractionResult(outcome=failure)


def extract_puzzle(
    page: Union[str, bytes, None],
    puzzle_type: Optional[str] = None
) -> Optional[PuzzleRecord]:
    """Return the crossword embedded in ``page``, or None if none is recognisable."""
    return extract_puzzle_with_outcome(page, puzzle_type).record
