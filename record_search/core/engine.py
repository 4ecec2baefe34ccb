"""Main search engine implementation."""

import time
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Union

import structlog

from ..config import Settings, get_settings
from ..models.query import ParsedQuery
from ..models.request import SearchOptions
from ..models.response import RankedResult, SearchStats
from .field_accessor import FieldAccessor, as_records, get_field_value
from .fuzzy_matcher import FuzzyMatcher
from .highlight import highlight
from .index import SearchIndex, create_index, search_index
from .normalizer import TextNormalizer
from .query_parser import parse_query

logger = structlog.get_logger(__name__)

PHRASE_SCORE = 50.0

OptionsLike = Union[SearchOptions, Mapping, None]


def resolve_options(
    options: OptionsLike,
    defaults: Optional[SearchOptions] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> SearchOptions:
    """
    Merge options given as a model or a plain mapping with per-call overrides.

    Args:
        options: SearchOptions, a mapping of option values, or None
        defaults: Options used when none are given (SearchOptions() if None)
        overrides: Individual option values applied last

    Returns:
        Validated SearchOptions
    """
    if isinstance(options, Mapping):
        options = SearchOptions(**{**(defaults or SearchOptions()).model_dump(), **options})
    options = options or defaults or SearchOptions()
    if overrides:
        options = SearchOptions(**{**options.model_dump(), **overrides})
    return options


def rank(
    items: Sequence[Any],
    parsed: ParsedQuery,
    options: SearchOptions,
    accessor: FieldAccessor = get_field_value,
    matcher: Optional[FuzzyMatcher] = None
) -> List[RankedResult]:
    """
    Score every record against a parsed query.

    Exclusions drop a record outright and every phrase is mandatory. Terms
    are optional and contribute their best fuzzy score across fields. The
    total is averaged over terms and phrases only when the query has terms.

    Args:
        items: Records to score
        parsed: Parsed query
        options: Fields and threshold to apply
        accessor: Resolves a field path against a record
        matcher: Fuzzy matcher used for terms

    Returns:
        Retained records with scores, sorted by descending score
    """
    matcher = matcher or FuzzyMatcher()
    results = []

    for item in items:
        values = [accessor(item, field) for field in options.fields]
        lowered = [value.lower() for value in values if value]

        if any(exclusion in value for exclusion in parsed.exclusions for value in lowered):
            continue

        total_score = 0.0
        phrase_matches = 0
        for phrase in parsed.phrases:
            if any(phrase in value for value in lowered):
                phrase_matches += 1
                total_score += PHRASE_SCORE

        if phrase_matches < len(parsed.phrases):
            continue

        matched_fields = 0
        for term in parsed.terms:
            best = matcher.best_match(term, values)
            if best is not None:
                total_score += best.score
                matched_fields += 1

        if matched_fields == 0 and phrase_matches == 0:
            continue

        if parsed.terms:
            score = total_score / (len(parsed.terms) + len(parsed.phrases))
        else:
            score = total_score

        if score >= options.threshold:
            results.append(RankedResult(item=item, score=score, matched_fields=matched_fields))

    # sort() is stable, so ties keep input order
    results.sort(key=lambda result: result.score, reverse=True)
    return results


def search(
    items: Sequence[Any],
    query: str,
    options: OptionsLike = None,
    accessor: FieldAccessor = get_field_value,
    **overrides: Any
) -> Sequence[Any]:
    """
    Filter and rank records against a free-text query.

    Args:
        items: Records to search
        query: Free-text query with optional "phrases" and -exclusions
        options: SearchOptions or a mapping such as {"fields": [...], "threshold": 20}
        accessor: Resolves a field path against a record
        **overrides: Individual option overrides, e.g. limit=5

    Returns:
        Matching records, best first; items unchanged for an empty query
    """
    items = as_records(items)
    if not query or not isinstance(query, str) or len(items) == 0:
        return items

    options = resolve_options(options, overrides=overrides)
    ranked = rank(items, parse_query(query), options, accessor)

    if options.limit > 0:
        ranked = ranked[:options.limit]

    return [result.item for result in ranked]


class SearchEngine:
    """Search service over caller-supplied record collections."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        accessor: Optional[FieldAccessor] = None
    ) -> None:
        """
        Initialize the search engine.

        Args:
            settings: Defaults for fields, threshold, limit and highlighting
            accessor: Custom field-path resolver for records
        """
        self.settings = settings or get_settings()
        self.accessor = accessor or get_field_value
        self.fuzzy_matcher = FuzzyMatcher()
        self.normalizer = TextNormalizer(self.settings.min_token_length)
        self._warned_case_sensitive = False

        # Performance tracking
        self._stats = self._empty_stats()

    def default_options(self) -> SearchOptions:
        """Build search options from the configured defaults."""
        return SearchOptions(
            fields=list(self.settings.default_fields),
            threshold=self.settings.default_threshold,
            limit=self.settings.default_limit
        )

    def search(
        self,
        items: Sequence[Any],
        query: str,
        options: OptionsLike = None,
        **overrides: Any
    ) -> Sequence[Any]:
        """
        Rank records against a query.

        Args:
            items: Records to search
            query: Free-text query
            options: SearchOptions or a mapping of option values (configured defaults if None)
            **overrides: Individual option overrides, e.g. fields=["name", "aliases"]

        Returns:
            Matching records, best first
        """
        start_time = time.time()

        items = as_records(items)
        if not query or not isinstance(query, str) or len(items) == 0:
            return items

        options = resolve_options(options, self.default_options(), overrides)

        if options.case_sensitive and not self._warned_case_sensitive:
            logger.warning("case_sensitive option has no effect; matching is case-insensitive")
            self._warned_case_sensitive = True

        parsed = parse_query(query)
        ranked = rank(items, parsed, options, self.accessor, self.fuzzy_matcher)
        if options.limit > 0:
            ranked = ranked[:options.limit]

        execution_time = (time.time() - start_time) * 1000
        self._record("total_queries", len(ranked), execution_time)

        logger.debug(
            "Ranked search completed",
            query=query,
            terms=len(parsed.terms),
            phrases=len(parsed.phrases),
            exclusions=len(parsed.exclusions),
            candidates=len(items),
            results=len(ranked),
            execution_time_ms=round(execution_time, 3)
        )

        return [result.item for result in ranked]

    def create_index(self, items: Sequence[Any], fields: Optional[List[str]] = None) -> SearchIndex:
        """
        Build an inverted index over a record collection.

        Args:
            items: Records to index
            fields: Field paths to index (configured defaults if None)

        Returns:
            A new SearchIndex owned by the caller
        """
        fields = fields if fields is not None else list(self.settings.default_fields)
        index = create_index(items, fields, self.accessor, self.normalizer)
        self._stats["indexes_built"] += 1

        logger.info("Search index built", fields=fields, **index.get_stats())
        return index

    def search_index(self, index: SearchIndex, query: str) -> List[Any]:
        """
        Look up records in a prebuilt index without ranking.

        Args:
            index: Index from create_index
            query: Free-text query

        Returns:
            Records containing every query token, in index order
        """
        start_time = time.time()
        results = search_index(index, query)

        execution_time = (time.time() - start_time) * 1000
        self._record("index_queries", len(results), execution_time)

        logger.debug(
            "Index search completed",
            query=query,
            results=len(results),
            execution_time_ms=round(execution_time, 3)
        )
        return results

    def highlight(self, text: str, query: str, css_class: Optional[str] = None) -> str:
        """Highlight query occurrences using the configured CSS class by default."""
        return highlight(text, query, css_class or self.settings.highlight_class)

    def get_stats(self) -> SearchStats:
        """Get engine statistics."""
        stats = self._stats.copy()

        calls = stats["total_queries"] + stats["index_queries"]
        stats["average_execution_time_ms"] = (
            stats["total_execution_time_ms"] / calls if calls > 0 else 0.0
        )

        return SearchStats(**stats)

    def reset_stats(self) -> None:
        """Reset statistics."""
        self._stats = self._empty_stats()

    def _record(self, counter: str, result_count: int, execution_time: float) -> None:
        self._stats[counter] += 1
        self._stats["total_execution_time_ms"] += execution_time
        if result_count > 0:
            self._stats["queries_with_results"] += 1
        else:
            self._stats["no_result_queries"] += 1

    @staticmethod
    def _empty_stats() -> dict:
        return {
            "total_queries": 0,
            "index_queries": 0,
            "queries_with_results": 0,
            "no_result_queries": 0,
            "indexes_built": 0,
            "total_execution_time_ms": 0.0,
        }
