"""Configuration management for the news word-finder service."""

from typing import Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")
    
    # API Keys
    openai_api_key: str = Field(..., validation_alias="OPENAI_API_KEY")
    anthropic_api_key: Optional[str] = Field(None, validation_alias="ANTHROPIC_API_KEY")
    
    # Application Settings
    environment: str = Field("development", validation_alias="ENVIRONMENT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    api_host: str = Field("0.0.0.0", validation_alias="API_HOST")
    api_port: int = Field(3000, validation_alias=AliasChoices("PORT", "API_PORT"))
    
    # Feed Configuration
    feed_url: str = Field("https://www.nu.nl/rss/Algemeen", validation_alias="FEED_URL")
    feed_item_limit: int = Field(10, validation_alias="FEED_ITEM_LIMIT")
    feed_timeout_seconds: Optional[float] = Field(None, validation_alias="FEED_TIMEOUT_SECONDS")
    
    # Model Configuration
    generation_model: str = Field("gpt-4o", validation_alias="GENERATION_MODEL")
    verification_model: str = Field("gpt-4o", validation_alias="VERIFICATION_MODEL")
    
    # Puzzle Settings
    puzzle_word_count: int = Field(6, validation_alias="PUZZLE_WORD_COUNT")
    grid_size: int = Field(15, validation_alias="GRID_SIZE")
    hint_language: str = Field("Dutch", validation_alias="HINT_LANGUAGE")


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
