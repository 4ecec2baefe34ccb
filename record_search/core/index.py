"""Inverted token index over a record collection."""

from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence, Set

from .field_accessor import FieldAccessor, as_records, get_field_value
from .normalizer import TextNormalizer


class SearchIndex:
    """Token-to-position index built once over a fixed record sequence."""
    
    def __init__(
        self,
        items: Sequence[Any],
        fields: List[str],
        tokens: Dict[str, Set[int]],
        item_tokens: Dict[int, Set[str]],
        normalizer: Optional[TextNormalizer] = None
    ) -> None:
        """
        Initialize the index from already computed token maps.
        
        Args:
            items: Records the positions refer to
            fields: Field paths the tokens were drawn from
            tokens: Token -> set of record positions
            item_tokens: Record position -> set of tokens it produced
            normalizer: Normalizer used to tokenize queries against this index
        """
        self.items = items
        self.fields = list(fields)
        self.tokens = tokens
        self.item_tokens = item_tokens
        self.normalizer = normalizer or TextNormalizer()
    
    def __len__(self) -> int:
        return len(self.items)
    
    def positions_for(self, query_token: str) -> Set[int]:
        """
        Collect positions of every indexed token starting with or containing a query token.
        
        Args:
            query_token: A single lowercase query token
            
        Returns:
            Set of record positions
        """
        positions = set()
        for indexed_token, item_positions in self.tokens.items():
            # prefix matches are a subset of containment
            if query_token in indexed_token:
                positions.update(item_positions)
        return positions
    
    def get_stats(self) -> Dict[str, int]:
        """Get index statistics."""
        return {
            "total_items": len(self.items),
            "total_fields": len(self.fields),
            "total_tokens": len(self.tokens),
            "total_postings": sum(len(positions) for positions in self.tokens.values()),
        }


def create_index(
    items: Sequence[Any],
    fields: List[str],
    accessor: FieldAccessor = get_field_value,
    normalizer: Optional[TextNormalizer] = None
) -> SearchIndex:
    """
    Build an inverted index over the given fields of each record.
    
    Args:
        items: Records to index
        fields: Field paths whose values are tokenized
        accessor: Resolves a field path against a record
        normalizer: Tokenizer settings (two-character minimum if None)
        
    Returns:
        A new SearchIndex
    """
    normalizer = normalizer or TextNormalizer()
    items = as_records(items)
    fields = fields or []
    
    tokens: Dict[str, Set[int]] = defaultdict(set)
    item_tokens: Dict[int, Set[str]] = {}
    
    for position, item in enumerate(items):
        produced = set()
        for field in fields:
            value = accessor(item, field)
            if not value:
                continue
            for token in normalizer.tokenize(value):
                produced.add(token)
                tokens[token].add(position)
        item_tokens[position] = produced
    
    return SearchIndex(items, fields, dict(tokens), item_tokens, normalizer)


def search_index(index: SearchIndex, query: str) -> List[Any]:
    """
    Look up records matching every token of a query.
    
    Within one query token any indexed token that starts with or contains it
    counts (OR); across query tokens the position sets are intersected (AND).
    No scoring is applied.
    
    Args:
        index: Index built with create_index
        query: Raw query text
        
    Returns:
        Matching records in index-construction order
    """
    query_tokens = index.normalizer.tokenize(query)
    if not query_tokens:
        return list(index.items)
    
    matching: Optional[Set[int]] = None
    for token in query_tokens:
        token_matches = index.positions_for(token)
        matching = token_matches if matching is None else matching & token_matches
        if not matching:
            return []
    
    return [index.items[position] for position in sorted(matching)]
