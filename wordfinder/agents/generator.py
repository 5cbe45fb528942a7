"""Generator agent that turns news items into a word-finder puzzle."""

import logging
from typing import Any, Dict, List

from .base import BaseAgent
from ..config import settings
from ..errors import GenerationError
from ..models.feeds import FeedItem

logger = logging.getLogger(__name__)

SCHEMA_EXAMPLE = """{
    "words": [
        {
            "word": "APPLE",
            "hint": "A red round fruit",
            "link": "LINK_FROM_RSS",
            "positions": [
                { "letter": "A", "row": 1, "col": 1 },
                { "letter": "P", "row": 1, "col": 2 },
                { "letter": "P", "row": 1, "col": 3 },
                { "letter": "L", "row": 1, "col": 4 },
                { "letter": "E", "row": 1, "col": 5 }
            ]
        },
        {
            "word": "ORANGE",
            "hint": "An orange coloured round fruit",
            "link": "LINK_FROM_RSS",
            "positions": [
                { "letter": "O", "row": 2, "col": 1 },
                { "letter": "R", "row": 3, "col": 1 },
                { "letter": "A", "row": 4, "col": 1 },
                { "letter": "N", "row": 5, "col": 1 },
                { "letter": "G", "row": 6, "col": 1 },
                { "letter": "E", "row": 7, "col": 1 }
            ]
        }
    ]
}"""


class PuzzleGeneratorAgent(BaseAgent):
    """Asks the completion API for a puzzle built from the feed items."""
    
    def __init__(self, word_count: int = None, hint_language: str = None, **kwargs):
        """Initialize the Generator Agent."""
        kwargs.setdefault("model_name", settings.generation_model)
        super().__init__(**kwargs)
        self.word_count = word_count if word_count is not None else settings.puzzle_word_count
        self.hint_language = hint_language if hint_language is not None else settings.hint_language
    
    def process(self, input_data: List[FeedItem]) -> Dict[str, Any]:
        """Generate a puzzle from the given feed items."""
        try:
            prompt = self.build_prompt(input_data)
            response = self.call_llm(prompt)
            return self.parse_json_response(response)
        
        except Exception as e:
            logger.error(f"Error in Generator Agent: {e}")
            raise GenerationError() from e
    
    def build_prompt(self, feed_items: List[FeedItem]) -> str:
        """Embed the feed items and the puzzle rules in one instruction."""
        rss_content = "\n".join(item.to_prompt_line() for item in feed_items)
        max_index = self.grid_size - 1
        
        rules = [
            "WORDS CAN NOT INTERSECT WITH EACH OTHER. Every tile can hold only 1 letter.",
            f"LETTERS CAN NOT HAVE A ROW OR COL HIGHER THAN {max_index}! Rows and cols run from 0 to {max_index}.",
            "WHEN A WORD INTERSECTS, GENERATE THE POSITIONS FOR THAT WORD ALL OVER AGAIN! "
            "REPEAT UNTIL THERE ARE NO INTERSECTIONS AT ALL!",
            "LETTERS HAVE TO BE ADJACENT! EITHER ALL ROWS OR ALL COLS OF A SINGLE WORD MUST MATCH!",
            "Set \"link\" to the link of the article the word was taken from."
        ]
        
        return f"""Create a wordfinder puzzle of {self.word_count} words on a {self.grid_size}x{self.grid_size} grid based on the following RSS feed titles and their contents:

{rss_content}

The JSON needs to be returned in this format:
{SCHEMA_EXAMPLE}

IMPORTANT:

{self.format_rules(rules)}

Add the hints based on the content provided from the news articles in {self.hint_language}!"""
