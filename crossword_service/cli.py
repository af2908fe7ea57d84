"""Command-line retrieval of a single crossword."""

import json
import logging
from datetime import datetime
from typing import Optional

import typer

from .config import settings
from .estimation import estimate_edition_number
from .fetching import GuardianPageFetcher
from .pipeline import PuzzleRetriever, RetrievalPolicy, utc_now

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command()
def main(
    puzzle_type: str = typer.Option(None, "--type", "-t", help="Puzzle type (default from settings)"),
    number: Optional[int] = typer.Option(None, "--number", "-n", min=1, help="Explicit edition number"),
    estimate_only: bool = typer.Option(False, help="Print today's estimated edition number and exit"),
    on: Optional[datetime] = typer.Option(
        None, formats=["%Y-%m-%d"], help="Treat this UTC date as today when estimating the edition"
    ),
    max_attempts: Optional[int] = typer.Option(None, min=1, help="Override the number of editions tried"),
):
    """Fetch a crossword and print it as JSON."""
    puzzle_type = (puzzle_type or settings.default_puzzle_type).strip().lower()

    clock = (lambda: on) if on else utc_now

    if estimate_only:
        typer.echo(estimate_edition_number(puzzle_type, clock()))
        return

    policy = RetrievalPolicy.from_settings()
    if max_attempts:
        policy = RetrievalPolicy(max_attempts=max_attempts, direction=policy.direction)

    fetcher = GuardianPageFetcher()
    try:
        result = PuzzleRetriever(fetcher=fetcher, policy=policy, clock=clock).retrieve(puzzle_type, number)
    finally:
        fetcher.close()

    if not result.success:
        logger.error(result.error_message)
        raise typer.Exit(1)

    typer.echo(json.dumps(result.record.to_payload(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
