"""Puzzle pipeline chaining the feed fetch, generation and verification stages."""

import asyncio
import logging
import time
from typing import Any, Dict, List

from pydantic import ValidationError

from ..agents import PuzzleGeneratorAgent, PuzzleVerifierAgent
from ..config import settings
from ..errors import PipelineError
from ..models.feeds import FeedItem
from ..models.puzzles import PipelineStage, Puzzle
from ..sources import FeedFetcher

logger = logging.getLogger(__name__)


class PipelineRun:
    """Tracks the stage of a single request.
    
    Stages only ever advance in order; any failure ends the run in FAILED.
    """
    
    ORDER = [
        PipelineStage.FETCHING,
        PipelineStage.GENERATING,
        PipelineStage.VERIFYING,
        PipelineStage.DONE
    ]
    
    def __init__(self):
        self.stage = PipelineStage.FETCHING
        self.history: List[PipelineStage] = [self.stage]
        self.error: PipelineError = None
    
    def advance(self, stage: PipelineStage) -> None:
        """Move to the next stage in the fixed order."""
        remaining = self.ORDER[self.ORDER.index(self.stage) + 1:] if self.stage in self.ORDER else []
        if not remaining or stage != remaining[0]:
            raise RuntimeError(f"Illegal stage transition {self.stage.value} -> {stage.value}")
        self.stage = stage
        self.history.append(stage)
    
    def fail(self, error: PipelineError) -> None:
        """Move to the terminal FAILED stage."""
        self.error = error
        self.stage = PipelineStage.FAILED
        self.history.append(PipelineStage.FAILED)


class PuzzlePipeline:
    """Runs Fetching -> Generating -> Verifying for one request at a time."""
    
    def __init__(
        self,
        feed_fetcher: FeedFetcher,
        generator_agent: PuzzleGeneratorAgent,
        verifier_agent: PuzzleVerifierAgent,
        grid_size: int = None
    ):
        """Initialize the puzzle pipeline."""
        self.feed_fetcher = feed_fetcher
        self.generator_agent = generator_agent
        self.verifier_agent = verifier_agent
        self.grid_size = grid_size if grid_size is not None else settings.grid_size
    
    async def generate_puzzle(self, run: PipelineRun = None) -> Dict[str, Any]:
        """Generate and verify a puzzle; raise the failing stage's error."""
        run = run or PipelineRun()
        start_time = time.time()
        
        try:
            logger.info("Starting puzzle generation pipeline")
            
            feed_items = await self._run_fetch_stage()
            
            run.advance(PipelineStage.GENERATING)
            puzzle = await self._run_generation_stage(feed_items)
            
            run.advance(PipelineStage.VERIFYING)
            verified = await self._run_verification_stage(puzzle)
            
            run.advance(PipelineStage.DONE)
            self.log_layout_issues(verified)
            
            logger.info(f"Puzzle generation completed in {time.time() - start_time:.2f} seconds")
            return verified
        
        except PipelineError as e:
            run.fail(e)
            logger.error(f"Pipeline failed during {e.stage.value} after {time.time() - start_time:.2f} seconds: {e}")
            raise
    
    async def _run_fetch_stage(self) -> List[FeedItem]:
        """Run the feed fetching stage."""
        logger.info("Running feed fetch stage")
        return await asyncio.to_thread(self.feed_fetcher.fetch)
    
    async def _run_generation_stage(self, feed_items: List[FeedItem]) -> Dict[str, Any]:
        """Run the puzzle generation stage."""
        logger.info(f"Running Generator Agent with {len(feed_items)} feed items")
        return await asyncio.to_thread(self.generator_agent.process, feed_items)
    
    async def _run_verification_stage(self, puzzle: Dict[str, Any]) -> Dict[str, Any]:
        """Run the puzzle verification stage."""
        logger.info("Running Verifier Agent")
        return await asyncio.to_thread(self.verifier_agent.process, puzzle)
    
    def log_layout_issues(self, puzzle_data: Dict[str, Any]) -> List[str]:
        """Log layout problems in the verified puzzle without changing it."""
        try:
            puzzle = Puzzle.model_validate(puzzle_data)
        except ValidationError as e:
            logger.warning(f"Verified puzzle does not match the expected shape: {e}")
            return []
        
        issues = puzzle.layout_issues(self.grid_size)
        for issue in issues:
            logger.warning(f"Puzzle layout issue: {issue}")
        
        return issues
    
    def get_status(self) -> Dict[str, Any]:
        """Describe the configured collaborators."""
        return {
            "pipeline_status": "operational",
            "feed_url": self.feed_fetcher.feed_url,
            "agents": {
                "generator": self.generator_agent.get_agent_metadata(),
                "verifier": self.verifier_agent.get_agent_metadata()
            }
        }
