"""Models describing parsed queries and single-string match outcomes."""

from typing import List

from pydantic import BaseModel, Field


class ParsedQuery(BaseModel):
    """A free-text query split into terms, quoted phrases and exclusions."""
    
    terms: List[str] = Field(default_factory=list, description="Plain lowercase terms")
    phrases: List[str] = Field(default_factory=list, description="Quoted lowercase phrases")
    exclusions: List[str] = Field(default_factory=list, description="Negated lowercase terms")

    @property
    def is_empty(self) -> bool:
        """Whether the query produced nothing to match on."""
        return not (self.terms or self.phrases or self.exclusions)


class MatchResult(BaseModel):
    """Outcome of matching one needle against one haystack."""
    
    matched: bool = Field(..., description="Whether any matching tier succeeded")
    score: float = Field(..., ge=0.0, le=100.0, description="Relevance score (0-100)")
    match_type: str = Field(
        default="no_match",
        description="Tier that produced the score (exact, prefix, substring, word_prefix, subsequence)"
    )
