"""Completion API client shared by the puzzle agents."""

import logging
from typing import Dict, List, Optional

import anthropic
import openai

from ..config import settings

logger = logging.getLogger(__name__)

Message = Dict[str, str]


class CompletionClient:
    """Sends role-tagged messages to OpenAI or Anthropic and returns the text."""
    
    def __init__(
        self,
        openai_client: Optional[openai.OpenAI] = None,
        anthropic_client: Optional[anthropic.Anthropic] = None,
        max_tokens: int = 4096
    ):
        """Initialize the provider clients."""
        self.openai_client = openai_client or openai.OpenAI(api_key=settings.openai_api_key)
        
        if anthropic_client is not None:
            self.anthropic_client = anthropic_client
        elif settings.anthropic_api_key:
            self.anthropic_client = anthropic.Anthropic(api_key=settings.anthropic_api_key)
        else:
            self.anthropic_client = None
        
        self.max_tokens = max_tokens
    
    def complete(self, messages: List[Message], model: str, json_mode: bool = True) -> str:
        """Call the appropriate provider based on model name."""
        try:
            if model.startswith('claude-'):
                return self._call_anthropic(messages, model)
            return self._call_openai(messages, model, json_mode)
        
        except Exception as e:
            logger.error(f"Error calling completion API {model}: {e}")
            raise
    
    def _call_openai(self, messages: List[Message], model: str, json_mode: bool) -> str:
        """Call OpenAI chat completions."""
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        
        response = self.openai_client.chat.completions.create(
            model=model,
            messages=messages,
            **kwargs
        )
        return response.choices[0].message.content
    
    def _call_anthropic(self, messages: List[Message], model: str) -> str:
        """Call the Anthropic Messages API."""
        if not self.anthropic_client:
            raise ValueError("Anthropic client not initialized")
        
        system = "\n\n".join(m["content"] for m in messages if m["role"] == "system")
        conversation = [m for m in messages if m["role"] != "system"]
        if not conversation:
            # The Messages API needs at least one user turn
            conversation = [{"role": "user", "content": "Respond with the JSON only."}]
        
        response = self.anthropic_client.messages.create(
            model=model,
            max_tokens=self.max_tokens,
            system=system,
            messages=conversation
        )
        return response.content[0].text
