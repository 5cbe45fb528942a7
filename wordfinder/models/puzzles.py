"""Puzzle data models for the news word-finder service."""

from enum import Enum
from typing import Dict, List, Tuple
from pydantic import BaseModel, Field


class PipelineStage(str, Enum):
    """Stage of a single puzzle request."""
    FETCHING = "FETCHING"
    GENERATING = "GENERATING"
    VERIFYING = "VERIFYING"
    DONE = "DONE"
    FAILED = "FAILED"


class LetterPosition(BaseModel):
    """A single letter placed on the grid."""
    
    letter: str = Field(..., description="Single character")
    row: int = Field(..., description="Zero-based grid row")
    col: int = Field(..., description="Zero-based grid column")


class PuzzleWord(BaseModel):
    """A word hidden in the grid, with its hint and source article."""
    
    word: str = Field(..., description="The hidden word")
    hint: str = Field("", description="Hint derived from the article content")
    link: str = Field("", description="URL of the article the word came from")
    positions: List[LetterPosition] = Field(default_factory=list, description="Letter coordinates in order")
    
    def is_straight_line(self) -> bool:
        """Check the letters form a contiguous horizontal or vertical run."""
        if len(self.positions) < 2:
            return True
        
        rows = [p.row for p in self.positions]
        cols = [p.col for p in self.positions]
        
        if len(set(rows)) == 1:
            steps = [b - a for a, b in zip(cols, cols[1:])]
        elif len(set(cols)) == 1:
            steps = [b - a for a, b in zip(rows, rows[1:])]
        else:
            return False
        
        return all(step == 1 for step in steps) or all(step == -1 for step in steps)


class Puzzle(BaseModel):
    """A complete word-finder puzzle.
    
    The model describes the shape the completion API is asked to produce.
    Nothing in the request path coerces a reply into it.
    """
    
    words: List[PuzzleWord] = Field(default_factory=list, description="Hidden words")
    
    def layout_issues(self, grid_size: int = 15) -> List[str]:
        """Report overlapping, out-of-bounds and crooked words."""
        issues = []
        occupied: Dict[Tuple[int, int], int] = {}

        for index, word in enumerate(self.words):
            if len(word.positions) != len(word.word):
                issues.append(
                    f"Word '{word.word}' has {len(word.positions)} positions for {len(word.word)} letters"
                )
            
            if not word.is_straight_line():
                issues.append(f"Word '{word.word}' is not a straight horizontal or vertical run")
            
            for position in word.positions:
                cell = (position.row, position.col)
                
                if not (0 <= position.row < grid_size and 0 <= position.col < grid_size):
                    issues.append(f"Word '{word.word}' has letter '{position.letter}' out of bounds at {cell}")
                
                if cell in occupied and occupied[cell] != index:
                    other = self.words[occupied[cell]].word
                    issues.append(f"Words '{other}' and '{word.word}' share cell {cell}")
                else:
                    occupied.setdefault(cell, index)
        
        return issues
