"""Tests for the command-line entry point."""

import json
from datetime import datetime
from unittest.mock import patch

from typer.testing import CliRunner

from crossword_service.cli import app
from crossword_service.models import AttemptOutcome, PuzzleRecord, RetrievalAttempt, RetrievalResult
from crossword_service.pipeline import RetrievalPolicy
from conftest import build_payload

runner = CliRunner()


class TestCli:
    """Tests for the fetch command."""

    def test_estimate_only(self):
        result = runner.invoke(app, ["--estimate-only", "--on", "2026-02-23"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "17410"

    def test_estimate_only_everyman(self):
        result = runner.invoke(app, ["--type", "everyman", "--estimate-only", "--on", "2026-02-23"])

        assert result.stdout.strip() == "4124"

    @patch("crossword_service.cli.GuardianPageFetcher")
    @patch("crossword_service.cli.PuzzleRetriever")
    def test_prints_record(self, mock_retriever_cls, mock_fetcher_cls):
        payload = build_payload()
        mock_retriever_cls.return_value.retrieve.return_value = RetrievalResult(
            puzzle_type="quick",
            success=True,
            record=PuzzleRecord.from_payload(payload),
            start_number=17405,
            estimated=False,
            attempts=[RetrievalAttempt(number=17405, outcome=AttemptOutcome.SUCCESS)]
        )

        result = runner.invoke(app, ["--number", "17405", "--max-attempts", "2"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == payload
        mock_retriever_cls.return_value.retrieve.assert_called_once_with("quick", 17405)
        policy = mock_retriever_cls.call_args.kwargs["policy"]
        assert policy == RetrievalPolicy(max_attempts=2)
        mock_fetcher_cls.return_value.close.assert_called_once()

    @patch("crossword_service.cli.GuardianPageFetcher")
    @patch("crossword_service.cli.PuzzleRetriever")
    def test_failure_exits_nonzero(self, mock_retriever_cls, mock_fetcher_cls):
        mock_retriever_cls.return_value.retrieve.return_value = RetrievalResult(
            puzzle_type="quick",
            success=False,
            start_number=17405,
            estimated=True,
            attempts=[RetrievalAttempt(number=17405, outcome=AttemptOutcome.NOT_FOUND)]
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert result.stdout == ""

    def test_invalid_date_is_usage_error(self):
        result = runner.invoke(app, ["--estimate-only", "--on", "23/02/2026"])

        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)

    @patch("crossword_service.cli.GuardianPageFetcher")
    @patch("crossword_service.cli.PuzzleRetriever")
    def test_on_date_drives_retrieval_estimate(self, mock_retriever_cls, mock_fetcher_cls):
        mock_retriever_cls.return_value.retrieve.return_value = RetrievalResult(
            puzzle_type="quick",
            success=True,
            record=PuzzleRecord.from_payload(build_payload(number=17410)),
            start_number=17410,
            estimated=True,
            attempts=[RetrievalAttempt(number=17410, outcome=AttemptOutcome.SUCCESS)]
        )

        result = runner.invoke(app, ["--on", "2026-02-23"])

        assert result.exit_code == 0
        clock = mock_retriever_cls.call_args.kwargs["clock"]
        assert clock() == datetime(2026, 2, 23)
        mock_retriever_cls.return_value.retrieve.assert_called_once_with("quick", None)
