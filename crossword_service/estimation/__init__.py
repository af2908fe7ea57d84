"""Edition number estimation for the Crossword Retrieval Service."""

from .estimator import (
    estimate_edition_number,
    estimate_for_config,
    count_publishing_days,
    to_utc_date
)

__all__ = [
    "estimate_edition_number",
    "estimate_for_config",
    "count_publishing_days",
    "to_utc_date"
]
