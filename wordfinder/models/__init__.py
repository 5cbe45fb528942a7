"""Data models for the news word-finder service."""

from .feeds import FeedItem
from .puzzles import (
    Puzzle,
    PuzzleWord,
    LetterPosition,
    PipelineStage
)

__all__ = [
    "FeedItem",
    "Puzzle",
    "PuzzleWord",
    "LetterPosition",
    "PipelineStage"
]
