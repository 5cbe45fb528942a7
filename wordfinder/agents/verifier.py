"""Verifier agent that asks the completion API to correct a puzzle layout."""

import json
import logging
from typing import Any, Dict

from .base import BaseAgent
from ..config import settings
from ..errors import VerificationError

logger = logging.getLogger(__name__)


class PuzzleVerifierAgent(BaseAgent):
    """Sends a generated puzzle back for a single correction pass."""
    
    def __init__(self, **kwargs):
        """Initialize the Verifier Agent."""
        kwargs.setdefault("model_name", settings.verification_model)
        super().__init__(**kwargs)
    
    def process(self, input_data: Dict[str, Any]) -> Dict[str, Any]:
        """Return the corrected puzzle in the same format."""
        try:
            puzzle_words = json.dumps(input_data)
            logger.debug(f"incoming words: {puzzle_words}")
            
            response = self.call_llm(self.build_prompt(puzzle_words))
            logger.debug(f"verified words: {response}")
            
            return self.parse_json_response(response)
        
        except Exception as e:
            logger.error(f"Error in Verifier Agent: {e}")
            raise VerificationError() from e
    
    def build_prompt(self, puzzle_words: str) -> str:
        """Build the correction instruction for a serialized puzzle."""
        size = self.grid_size
        
        return f"""This is a JSON which contains words and their corresponding letter positions for a wordfinder puzzle:

{puzzle_words}

Check the JSON for duplicate letters. Go over ALL of the letter objects and check if ANY letter in the WHOLE JSON has a duplicate row/col combination.

For example, if the letter K from word 1 has row: 14, col: 5, then no letter from another word can also have row: 14 and col: 5.

WORDS CAN NOT INTERSECT WITH EACH OTHER.

Also check that no letter has a row or col of {size} or higher. Words must be horizontal or vertical (either all rows or all cols of a word match; vary the orientation to make the puzzle more random). If a word is too long and goes out of bounds (e.g. a 10 letter word that starts at col 12 on this {size}x{size} grid) find a new place for it. Every tile (e.g. row: 1, col: 1) can only have 1 letter!

If you find any duplicate, generate new positions for all of the letters of THAT word.
Repeat until no duplicates remain.
When you are done, return the improved JSON in exactly the same format."""
