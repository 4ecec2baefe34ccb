"""Free-text query parsing into terms, quoted phrases and exclusions."""

import re

from ..models.query import ParsedQuery

PHRASE_REGEX = re.compile(r'"([^"]+)"')
EXCLUSION_PREFIX = '-'


def parse_query(query: str) -> ParsedQuery:
    """
    Split a query into phrases, exclusions and plain terms.
    
    Complete ``"..."`` spans become phrases. Of the remaining
    whitespace-delimited fragments, ``-word`` becomes an exclusion and
    everything else a term. All parts are lowercased and keep their order.
    
    Args:
        query: Raw query text
        
    Returns:
        ParsedQuery with terms, phrases and exclusions
    """
    if not query or not isinstance(query, str):
        return ParsedQuery()
    
    phrases = [match.group(1).lower() for match in PHRASE_REGEX.finditer(query)]
    remaining = PHRASE_REGEX.sub(' ', query)
    
    terms = []
    exclusions = []
    for fragment in remaining.split():
        if fragment.startswith(EXCLUSION_PREFIX) and len(fragment) > 1:
            exclusions.append(fragment[1:].lower())
        else:
            terms.append(fragment.lower())
    
    return ParsedQuery(terms=terms, phrases=phrases, exclusions=exclusions)
