"""Main FastAPI application for the news word-finder service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from .config import settings
from .agents import CompletionClient, PuzzleGeneratorAgent, PuzzleVerifierAgent
from .errors import PipelineError
from .pipeline import PuzzlePipeline
from .sources import FeedFetcher

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = structlog.get_logger(__name__)

# Global components
puzzle_pipeline: Optional[PuzzlePipeline] = None


def build_pipeline() -> PuzzlePipeline:
    """Construct the pipeline with real feed and completion clients."""
    completion_client = CompletionClient()
    
    return PuzzlePipeline(
        feed_fetcher=FeedFetcher(),
        generator_agent=PuzzleGeneratorAgent(completion_client=completion_client),
        verifier_agent=PuzzleVerifierAgent(completion_client=completion_client)
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    logger.info("Starting word-finder service...")
    
    global puzzle_pipeline
    
    try:
        puzzle_pipeline = build_pipeline()
        
        logger.info("Server is running", url=f"http://localhost:{settings.api_port}")
        
        yield
        
    except Exception as e:
        logger.error(f"Failed to start application: {e}")
        raise
    
    finally:
        logger.info("Word-finder service shut down")


# Create FastAPI app
app = FastAPI(
    title="News Word-Finder",
    description="Word-finder puzzles generated from the news",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Dependency injection
def get_puzzle_pipeline() -> PuzzlePipeline:
    """Get puzzle pipeline dependency."""
    if puzzle_pipeline is None:
        raise HTTPException(status_code=503, detail="Puzzle pipeline not available")
    return puzzle_pipeline


@app.get("/health")
async def health_check(pipeline: PuzzlePipeline = Depends(get_puzzle_pipeline)):
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "News Word-Finder",
        "pipeline": pipeline.get_status()
    }


@app.post("/generate")
async def generate_puzzle(pipeline: PuzzlePipeline = Depends(get_puzzle_pipeline)):
    """Generate a word-finder puzzle from the current news feed."""
    try:
        logger.info("Generating new puzzle")
        
        verified_puzzle = await pipeline.generate_puzzle()
        
        return {"reply": verified_puzzle}
    
    except PipelineError as e:
        logger.error("Error generating puzzle", stage=e.stage.value, error=str(e))
        return JSONResponse(status_code=500, content={"error": str(e)})


# Error handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    """Handle HTTP exceptions."""
    logger.error(f"HTTP exception: {exc.status_code} - {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle general exceptions."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "wordfinder.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development"
    )
