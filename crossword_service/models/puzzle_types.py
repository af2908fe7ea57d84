"""Puzzle type definitions and their publication cadences."""

from datetime import date
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Cadence(str, Enum):
    """How often a puzzle type is published."""
    DAILY_EXCEPT_REST_DAY = "DAILY_EXCEPT_REST_DAY"  # e.g. Quick, Monday to Saturday
    WEEKLY = "WEEKLY"                                # e.g. Everyman


class PuzzleType(str, Enum):
    """Puzzle types with a known numbering anchor."""
    QUICK = "quick"
    EVERYMAN = "everyman"


# date.weekday() values
SUNDAY = 6


class PuzzleTypeConfig(BaseModel):
    """Numbering anchor and cadence for one puzzle type."""

    name: str = Field(..., description="Type tag as used in publisher URLs")
    reference_date: date = Field(..., description="Publication date of the reference edition")
    reference_number: int = Field(..., gt=0, description="Edition number published on reference_date")
    cadence: Cadence = Field(..., description="Publication cadence rule")
    rest_weekday: Optional[int] = Field(
        None,
        ge=0,
        le=6,
        description="Weekday (Monday=0) with no edition, for daily cadences"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_rest_weekday(self) -> "PuzzleTypeConfig":
        if self.cadence == Cadence.DAILY_EXCEPT_REST_DAY and self.rest_weekday is None:
            raise ValueError(f"Puzzle type {self.name!r} has a daily cadence but no rest_weekday")
        return self


DEFAULT_PUZZLE_TYPE = PuzzleType.QUICK.value

PUZZLE_TYPES: Dict[str, PuzzleTypeConfig] = {
    PuzzleType.QUICK.value: PuzzleTypeConfig(
        name=PuzzleType.QUICK.value,
        reference_date=date(2026, 2, 17),
        reference_number=17405,
        cadence=Cadence.DAILY_EXCEPT_REST_DAY,
        rest_weekday=SUNDAY,
    ),
    PuzzleType.EVERYMAN.value: PuzzleTypeConfig(
        name=PuzzleType.EVERYMAN.value,
        reference_date=date(2026, 2, 16),
        reference_number=4123,
        cadence=Cadence.WEEKLY,
    ),
}


def get_puzzle_type_config(puzzle_type: str) -> Optional[PuzzleTypeConfig]:
    """Return the registered config for a type, or None if the type is unknown."""
    return PUZZLE_TYPES.get(puzzle_type)


def list_puzzle_types() -> List[PuzzleTypeConfig]:
    """Return all registered puzzle types."""
    return list(PUZZLE_TYPES.values())
