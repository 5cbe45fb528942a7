"""Pipeline orchestration for the news word-finder service."""

from .puzzle_pipeline import PipelineRun, PuzzlePipeline

__all__ = ["PipelineRun", "PuzzlePipeline"]
