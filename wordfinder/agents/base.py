"""Base agent class with common completion functionality."""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .completion import CompletionClient
from ..config import settings

logger = logging.getLogger(__name__)


class BaseAgent(ABC):
    """Base class for the puzzle generation and verification agents."""
    
    def __init__(self, completion_client: CompletionClient, model_name: str = None, grid_size: int = None):
        """Initialize the base agent."""
        self.completion_client = completion_client
        self.model_name = model_name if model_name is not None else settings.generation_model
        self.grid_size = grid_size if grid_size is not None else settings.grid_size
    
    @abstractmethod
    def process(self, input_data: Any) -> Dict[str, Any]:
        """Process input data and return the parsed puzzle."""
        pass
    
    def call_llm(self, prompt: str) -> str:
        """Send the prompt as a single system message and request JSON."""
        messages = [{"role": "system", "content": prompt}]
        return self.completion_client.complete(messages, model=self.model_name, json_mode=True)
    
    def parse_json_response(self, response: str) -> Dict[str, Any]:
        """Parse the model's text output as JSON."""
        try:
            return json.loads(response)
        except (TypeError, json.JSONDecodeError) as e:
            logger.error(f"Failed to parse JSON response: {e}")
            logger.error(f"Response was: {response}")
            raise ValueError(f"Invalid JSON response: {e}")
    
    def format_rules(self, rules: List[str]) -> str:
        """Number a list of rules for display in prompts."""
        return "\n".join(f"{i}. {rule}" for i, rule in enumerate(rules, start=1))
    
    def get_agent_metadata(self) -> Dict[str, Any]:
        """Get metadata about this agent."""
        return {
            "agent_name": self.__class__.__name__,
            "model_name": self.model_name
        }
