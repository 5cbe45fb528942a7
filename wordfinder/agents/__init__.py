"""Completion agents for the puzzle pipeline."""

from .completion import CompletionClient
from .generator import PuzzleGeneratorAgent
from .verifier import PuzzleVerifierAgent

__all__ = [
    "CompletionClient",
    "PuzzleGeneratorAgent",
    "PuzzleVerifierAgent"
]
