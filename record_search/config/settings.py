"""Application settings and configuration management."""

from functools import lru_cache
from typing import List

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Search engine settings with environment variable support."""
    
    # Application
    debug: bool = Field(default=False)  # forces console log rendering
    
    # Search Configuration
    default_fields: List[str] = Field(default=["name"])
    default_threshold: float = Field(default=20.0, ge=0.0)
    default_limit: int = Field(default=0, ge=0)  # 0 = no limit
    min_token_length: int = Field(default=2, ge=1)
    
    # Presentation helpers
    highlight_class: str = Field(default="search-highlight")
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    model_config = ConfigDict(
        env_prefix="RECORD_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
