"""Data models for record search."""

from .query import ParsedQuery, MatchResult
from .request import SearchOptions
from .response import RankedResult, SearchStats

__all__ = [
    "ParsedQuery",
    "MatchResult",
    "SearchOptions",
    "RankedResult",
    "SearchStats",
]
