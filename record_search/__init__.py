"""
Record Search - In-memory fuzzy search and indexing for structured records.

This package filters and ranks small-to-medium record collections (such as
threat-actor entries) against free-text queries with exact, prefix, substring
and subsequence matching, and offers an inverted token index for repeated
unranked lookups over the same dataset.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine, search
from .core.fuzzy_matcher import fuzzy_match
from .core.highlight import highlight
from .core.index import SearchIndex, create_index, search_index
from .core.normalizer import tokenize
from .core.query_parser import parse_query
from .models import MatchResult, ParsedQuery, SearchOptions

__all__ = [
    "SearchEngine",
    "SearchIndex",
    "SearchOptions",
    "ParsedQuery",
    "MatchResult",
    "search",
    "fuzzy_match",
    "highlight",
    "create_index",
    "search_index",
    "tokenize",
    "parse_query",
]
