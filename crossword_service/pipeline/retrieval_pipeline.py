"""Retrieval pipeline: estimate a starting edition, then search nearby editions."""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from ..config import settings
from ..estimation import estimate_edition_number
from ..exceptions import TransportError
from ..extraction import ExtractionOutcome, extract_puzzle_with_outcome
from ..fetching import BasePageFetcher
from ..models.puzzles import AttemptOutcome, PuzzleRecord, RetrievalAttempt, RetrievalResult

logger = logging.getLogger(__name__)

Estimator = Callable[[str, datetime], int]
Clock = Callable[[], datetime]


class SearchDirection(str, Enum):
    """Which way to step from the starting edition number."""
    DESCENDING = "descending"  # estimate is usually exact or slightly ahead
    ASCENDING = "ascending"


class RetrievalPolicy(BaseModel):
    """How many edition numbers to try, and in which direction."""

    max_attempts: int = Field(8, ge=1, description="Maximum editions tried per retrieval")
    direction: SearchDirection = Field(SearchDirection.DESCENDING, description="Search direction")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls) -> "RetrievalPolicy":
        """Build the policy configured for this deployment."""
        return cls(
            max_attempts=settings.max_retrieval_attempts,
            direction=SearchDirection(settings.search_direction.lower())
        )

    def candidates(self, start: int) -> List[int]:
        """Edition numbers to try, best first. Numbers below 1 are skipped."""
        step = -1 if self.direction == SearchDirection.DESCENDING else 1
        numbers = (start + step * offset for offset in range(self.max_attempts))
        return [number for number in numbers if number >= 1]


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class PuzzleRetriever:
    """Finds the most recent published edition of a puzzle type.

    Attempts run strictly in sequence so that the candidate closest to the
    starting number wins and no further requests are made after a success.
    """

    def __init__(
        self,
        fetcher: BasePageFetcher,
        policy: Optional[RetrievalPolicy] = None,
        estimator: Estimator = estimate_edition_number,
        clock: Clock = utc_now
    ):
        """Initialize the retriever with its collaborators."""
        self.fetcher = fetcher
        self.policy = policy or RetrievalPolicy.from_settings()
        self.estimator = estimator
        self.clock = clock

    def retrieve(self, puzzle_type: str, number: Optional[int] = None) -> RetrievalResult:
        """Retrieve a puzzle, starting from ``number`` or from today's estimate."""
        if number is not None:
            start_number, estimated = number, False
        else:
            start_number, estimated = self.estimator(puzzle_type, self.clock()), True

        candidates = self.policy.candidates(start_number)
        logger.info(
            f"Retrieving {puzzle_type} puzzle from #{start_number} "
            f"({'estimated' if estimated else 'explicit'}), up to {len(candidates)} attempts"
        )

        attempts: List[RetrievalAttempt] = []
        last_error: Optional[str] = None

        for index, candidate in enumerate(candidates):
            logger.info(f"Retrieval attempt {index + 1}/{len(candidates)}: {puzzle_type} #{candidate}")

            attempt, record = self._attempt(puzzle_type, candidate)
            attempts.append(attempt)

            if record is not None:
                logger.info(f"Found {puzzle_type} #{candidate} with {len(record.entries)} entries")
                return RetrievalResult(
                    puzzle_type=puzzle_type,
                    success=True,
                    record=record,
                    start_number=start_number,
                    estimated=estimated,
                    attempts=attempts,
                    last_error=last_error
                )

            if attempt.error:
                last_error = attempt.error
                logger.warning(f"Attempt {index + 1} failed: {attempt.error}")

        result = RetrievalResult(
            puzzle_type=puzzle_type,
            success=False,
            start_number=start_number,
            estimated=estimated,
            attempts=attempts,
            last_error=last_error
        )
        logger.error(result.error_message)
        return result

    def _attempt(self, puzzle_type: str, number: int) -> Tuple[RetrievalAttempt, Optional[PuzzleRecord]]:
        """Fetch and extract one edition."""
        url = self.fetcher.build_url(puzzle_type, number)

        try:
            page = self.fetcher.fetch_url(url)
        except TransportError as e:
            return RetrievalAttempt(
                number=number,
                outcome=AttemptOutcome.TRANSPORT_ERROR,
                error=f"Puzzle {number}: {e}",
                url=url
            ), None

        if page is None:
            return RetrievalAttempt(number=number, outcome=AttemptOutcome.NOT_FOUND, url=url), None

        extraction = extract_puzzle_with_outcome(page, puzzle_type)

        if extraction.outcome == ExtractionOutcome.FOUND:
            return RetrievalAttempt(number=number, outcome=AttemptOutcome.SUCCESS, url=url), extraction.record

        if extraction.outcome == ExtractionOutcome.EMPTY:
            outcome, message = AttemptOutcome.EXTRACTION_EMPTY, "No entries in puzzle data"
        elif extraction.outcome == ExtractionOutcome.PARSE_ERROR:
            outcome, message = AttemptOutcome.PARSE_ERROR, "Could not extract data from page"
        else:
            outcome, message = AttemptOutcome.NO_PUZZLE, "Could not extract data from page"

        return RetrievalAttempt(
            number=number,
            outcome=outcome,
            error=f"Puzzle {number}: {message}",
            url=url
        ), None
