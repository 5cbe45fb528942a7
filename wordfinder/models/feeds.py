"""Feed data models for the news word-finder service."""

from pydantic import BaseModel, Field


class FeedItem(BaseModel):
    """A single news entry taken from the RSS feed."""
    
    title: str = Field("", description="Article headline")
    content: str = Field("", description="Plain-text summary of the article")
    link: str = Field("", description="URL of the article")
    
    def to_prompt_line(self) -> str:
        """Flatten the item into a single prompt line."""
        return f"{self.title}: {self.content}: {self.link}"
