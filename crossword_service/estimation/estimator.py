"""Estimate which edition of a puzzle type is current on a given day.

The publisher numbers editions sequentially. Given one known (date, number)
anchor per type and its cadence, any other day's number can be extrapolated:

* daily types skip numbering on their rest day, so only publishing days count;
* weekly types advance by one per seven days, rounded to the nearest week.

Everything here is pure. Callers pass "today" in explicitly.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Iterator, Union

from ..models.puzzle_types import (
    Cadence,
    PuzzleTypeConfig,
    PUZZLE_TYPES,
    DEFAULT_PUZZLE_TYPE,
    get_puzzle_type_config
)

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def to_utc_date(moment: DateLike) -> date:
    """Strip the time of day, converting aware datetimes to UTC first.

    Naive datetimes are assumed to already be in UTC.
    """
    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return moment.date()
    return moment


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day in the half-open range (start, end]."""
    for offset in range(1, (end - start).days + 1):
        yield start + timedelta(days=offset)


def count_publishing_days(start: date, end: date, rest_weekday: int) -> int:
    """Count the days in (start, end] that are not the rest weekday."""
    return sum(1 for day in iter_days(start, end) if day.weekday() != rest_weekday)


def _estimate_daily(config: PuzzleTypeConfig, today: date) -> int:
    if today >= config.reference_date:
        return config.reference_number + count_publishing_days(
            config.reference_date, today, config.rest_weekday
        )
    return config.reference_number - count_publishing_days(
        today, config.reference_date, config.rest_weekday
    )


def _estimate_weekly(config: PuzzleTypeConfig, today: date) -> int:
    days = (today - config.reference_date).days
    # floor(days / 7 + 1/2); an integer day count never sits exactly halfway
    weeks = (2 * days + 7) // 14
    return config.reference_number + weeks


def estimate_for_config(config: PuzzleTypeConfig, today: DateLike) -> int:
    """Estimate the edition number current on ``today`` for one type config."""
    today = to_utc_date(today)

    if config.cadence == Cadence.DAILY_EXCEPT_REST_DAY:
        return _estimate_daily(config, today)
    if config.cadence == Cadence.WEEKLY:
        return _estimate_weekly(config, today)

    raise ValueError(f"Unsupported cadence: {config.cadence}")


def estimate_edition_number(puzzle_type: str, today: DateLike) -> int:
    """Estimate the edition number of ``puzzle_type`` current on ``today``.

    Unknown types fall back to the default type's numbering rather than
    failing, so a request for an unregistered type still gets a starting point.
    """
    config = get_puzzle_type_config(puzzle_type)
    if config is None:
        logger.debug(f"Unknown puzzle type {puzzle_type!r}, estimating as {DEFAULT_PUZZLE_TYPE!r}")
        config = PUZZLE_TYPES[DEFAULT_PUZZLE_TYPE]

    estimate = estimate_for_config(config, today)
    logger.debug(f"Estimated {puzzle_type} edition {estimate} for {to_utc_date(today)}")
    return estimate
