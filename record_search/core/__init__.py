"""Core search engine functionality."""

from .engine import SearchEngine, search
from .field_accessor import get_field_value
from .fuzzy_matcher import FuzzyMatcher, fuzzy_match
from .highlight import highlight
from .index import SearchIndex, create_index, search_index
from .normalizer import TextNormalizer, tokenize
from .query_parser import parse_query

__all__ = [
    "SearchEngine",
    "search",
    "get_field_value",
    "FuzzyMatcher",
    "fuzzy_match",
    "highlight",
    "SearchIndex",
    "create_index",
    "search_index",
    "TextNormalizer",
    "tokenize",
    "parse_query",
]
