"""Main FastAPI application for the Crossword Retrieval Service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from .config import settings
from .estimation import estimate_for_config
from .fetching import GuardianPageFetcher
from .models import list_puzzle_types
from .pipeline import PuzzleRetriever, RetrievalPolicy, utc_now

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = structlog.get_logger(__name__)

# Global components
page_fetcher: Optional[GuardianPageFetcher] = None
puzzle_retriever: Optional[PuzzleRetriever] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    logger.info("Starting Crossword Retrieval Service...")

    global page_fetcher, puzzle_retriever

    try:
        page_fetcher = GuardianPageFetcher()
        puzzle_retriever = PuzzleRetriever(
            fetcher=page_fetcher,
            policy=RetrievalPolicy.from_settings()
        )

        logger.info("Crossword Retrieval Service started successfully")

        yield

    except Exception as e:
        logger.error(f"Failed to start application: {e}")
        raise

    finally:
        logger.info("Shutting down Crossword Retrieval Service...")

        if page_fetcher:
            page_fetcher.close()

        logger.info("Crossword Retrieval Service shut down")


# Create FastAPI app
app = FastAPI(
    title="Crossword Retrieval Service",
    description="Finds and extracts today's Guardian crossword as JSON",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


# Dependency injection
def get_puzzle_retriever() -> PuzzleRetriever:
    """Get puzzle retriever dependency."""
    if puzzle_retriever is None:
        raise HTTPException(status_code=503, detail="Puzzle retriever not available")
    return puzzle_retriever


def normalize_puzzle_type(puzzle_type: Optional[str]) -> str:
    """Lower-case and strip a requested type, falling back to the default."""
    normalized = (puzzle_type or "").strip().lower()
    return normalized or settings.default_puzzle_type


# Health check endpoints
@app.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "Crossword Retrieval Service"}


# Puzzle endpoints
@app.get("/puzzle/types")
async def get_puzzle_types():
    """List known puzzle types with their numbering anchors and today's estimate."""
    today = utc_now()
    return {
        "default_type": settings.default_puzzle_type,
        "types": [
            {
                **config.model_dump(mode="json"),
                "current_estimate": estimate_for_config(config, today)
            }
            for config in list_puzzle_types()
        ]
    }


@app.get("/puzzle")
def get_puzzle(
    puzzle_type: Optional[str] = Query(None, alias="type", pattern=r"^\s*[A-Za-z0-9_-]*\s*$"),
    number: Optional[int] = Query(None, gt=0, description="Explicit edition number"),
    retriever: PuzzleRetriever = Depends(get_puzzle_retriever)
):
    """Fetch a crossword by type, today's edition unless a number is given."""
    puzzle_type = normalize_puzzle_type(puzzle_type)

    try:
        logger.info("Retrieving puzzle", puzzle_type=puzzle_type, number=number)

        result = retriever.retrieve(puzzle_type, number)

    except Exception as e:
        logger.error(f"Error retrieving {puzzle_type} puzzle: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not result.success:
        logger.error("Puzzle search exhausted", puzzle_type=puzzle_type, tried=result.tried_numbers)
        raise HTTPException(status_code=500, detail=result.error_message)

    return JSONResponse(
        content=result.record.to_payload(),
        headers={"Cache-Control": f"public, max-age={settings.cache_max_age_seconds}"}
    )


# Error handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    """Handle HTTP exceptions."""
    logger.error(f"HTTP exception: {exc.status_code} - {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "status_code": exc.status_code}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle general exceptions."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "status_code": 500}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "crossword_service.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development"
    )
