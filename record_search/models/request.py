"""Request models for ranked search."""

from typing import List

from pydantic import BaseModel, Field, field_validator


class SearchOptions(BaseModel):
    """Options controlling a ranked search call."""
    
    fields: List[str] = Field(default_factory=lambda: ["name"], description="Field paths to match against")
    threshold: float = Field(default=20.0, ge=0.0, description="Minimum final score to keep a record")
    limit: int = Field(default=0, ge=0, description="Maximum number of results (0 = no limit)")
    case_sensitive: bool = Field(
        default=False,
        description="Accepted for compatibility; matching is always case-insensitive"
    )

    @field_validator('fields')
    @classmethod
    def validate_fields(cls, v: List[str]) -> List[str]:
        """Drop blank field paths."""
        return [field.strip() for field in v if field and field.strip()]
