"""Tests for data models."""

import pytest
from datetime import date
from pydantic import ValidationError

from crossword_service.models import (
    AttemptOutcome,
    Cadence,
    Entry,
    PuzzleRecord,
    PuzzleTypeConfig,
    RetrievalAttempt,
    RetrievalResult,
    DEFAULT_PUZZLE_TYPE,
    get_puzzle_type_config,
    list_puzzle_types
)
from conftest import build_payload


class TestPuzzleTypes:
    """Tests for the puzzle type registry."""

    def test_known_types(self):
        names = [config.name for config in list_puzzle_types()]
        assert names == ["quick", "everyman"]
        assert DEFAULT_PUZZLE_TYPE == "quick"

    def test_quick_anchor(self):
        quick = get_puzzle_type_config("quick")

        assert quick.reference_date == date(2026, 2, 17)
        assert quick.reference_number == 17405
        assert quick.cadence == Cadence.DAILY_EXCEPT_REST_DAY
        assert quick.rest_weekday == 6

    def test_everyman_anchor(self):
        everyman = get_puzzle_type_config("everyman")

        assert everyman.reference_number == 4123
        assert everyman.cadence == Cadence.WEEKLY

    def test_unknown_type(self):
        assert get_puzzle_type_config("cryptic") is None

    def test_daily_cadence_requires_rest_day(self):
        with pytest.raises(ValidationError):
            PuzzleTypeConfig(
                name="broken",
                reference_date=date(2026, 1, 1),
                reference_number=1,
                cadence=Cadence.DAILY_EXCEPT_REST_DAY
            )

    def test_reference_number_positive(self):
        with pytest.raises(ValidationError):
            PuzzleTypeConfig(
                name="broken",
                reference_date=date(2026, 1, 1),
                reference_number=0,
                cadence=Cadence.WEEKLY
            )


class TestPuzzleRecord:
    """Tests for PuzzleRecord and Entry."""

    def test_from_payload(self):
        record = PuzzleRecord.from_payload(build_payload())

        assert len(record.entries) == 3
        assert record.entries[0]["id"] == "1-across"
        assert record.edition_number == 17405

    def test_typed_entries(self):
        entry = PuzzleRecord.from_payload(build_payload()).typed_entries[0]

        assert entry.id == "1-across"
        assert entry.direction == "across"
        assert entry.length == 5
        assert entry.position == {"x": 0, "y": 0}

    def test_round_trip_is_verbatim(self):
        payload = build_payload()

        assert PuzzleRecord.from_payload(payload).to_payload() == payload

    def test_payload_copy_is_independent(self):
        payload = build_payload()
        record = PuzzleRecord.from_payload(payload)

        payload["entries"].clear()

        assert len(record.to_payload()["entries"]) == 3

    def test_empty_entries_invalid(self):
        with pytest.raises(ValidationError):
            PuzzleRecord.from_payload(build_payload(entry_count=0))

    def test_missing_entries_invalid(self):
        with pytest.raises(ValidationError):
            PuzzleRecord.from_payload({"id": "crosswords/quick/1"})

    def test_entries_must_be_a_list(self):
        with pytest.raises(ValidationError):
            PuzzleRecord.from_payload({"entries": {"1-across": {}}})

    @pytest.mark.parametrize("entries", [
        [{"id": "1-across", "clue": {"text": "Cat (3)", "html": "<b>Cat</b> (3)"}}],
        [{"id": "1-across", "direction": 1, "length": "5", "position": [0, 0]}],
        [{"id": None, "number": "1a"}],
        [1, 2, 3],
        ["1-across"],
    ])
    def test_entry_field_types_do_not_matter(self, entries):
        payload = {"number": 17405, "entries": entries}
        record = PuzzleRecord.from_payload(payload)

        assert len(record.entries) == len(entries)
        assert record.to_payload() == payload

    def test_typed_entries_of_odd_shapes(self):
        record = PuzzleRecord.from_payload(
            {"entries": [{"clue": {"text": "Cat (3)"}, "direction": 1}, 7]}
        )

        first, second = record.typed_entries
        assert first.clue == {"text": "Cat (3)"}
        assert first.direction == 1
        assert second.id is None

    def test_entry_extra_fields_kept(self):
        entry = Entry(id="1-across", clue="Cat (3)", solution="CAT", group=["1-across"])

        assert entry.model_extra == {"solution": "CAT", "group": ["1-across"]}

    def test_entry_numeric_id(self):
        assert Entry(id=7).id == 7

    def test_constructed_record_serializes_set_fields(self):
        record = PuzzleRecord(entries=[{"id": "1-down", "length": 4}])

        assert record.to_payload() == {"entries": [{"id": "1-down", "length": 4}]}

    def test_edition_number_missing(self):
        assert PuzzleRecord(entries=[{}]).edition_number is None


class TestRetrievalResult:
    """Tests for RetrievalResult."""

    def test_failure_message(self):
        result = RetrievalResult(
            puzzle_type="everyman",
            success=False,
            start_number=4130,
            estimated=True,
            attempts=[
                RetrievalAttempt(number=4130, outcome=AttemptOutcome.NOT_FOUND),
                RetrievalAttempt(number=4129, outcome=AttemptOutcome.TRANSPORT_ERROR, error="Puzzle 4129: HTTP 500"),
            ],
            last_error="Puzzle 4129: HTTP 500"
        )

        assert result.tried_numbers == [4130, 4129]
        assert result.error_message == (
            "Could not find a valid everyman puzzle. Tried: 4130, 4129. Last error: Puzzle 4129: HTTP 500"
        )

    def test_success_has_no_message(self):
        result = RetrievalResult(
            puzzle_type="quick",
            success=True,
            record=PuzzleRecord.from_payload(build_payload()),
            start_number=17405,
            estimated=False,
            attempts=[RetrievalAttempt(number=17405, outcome=AttemptOutcome.SUCCESS)]
        )

        assert result.error_message is None
        assert result.raise_for_failure() is result.record

    def test_attempt_outcome_serializes_as_value(self):
        attempt = RetrievalAttempt(number=1, outcome=AttemptOutcome.EXTRACTION_EMPTY)

        assert attempt.model_dump()["outcome"] == "extraction-empty"
