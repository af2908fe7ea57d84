"""Pipeline orchestration for the Crossword Retrieval Service."""

from .retrieval_pipeline import PuzzleRetriever, RetrievalPolicy, SearchDirection, utc_now

__all__ = ["PuzzleRetriever", "RetrievalPolicy", "SearchDirection", "utc_now"]
