"""Marking query occurrences inside display text."""

import re

DEFAULT_HIGHLIGHT_CLASS = "search-highlight"


def highlight(text: str, query: str, css_class: str = DEFAULT_HIGHLIGHT_CLASS) -> str:
    """
    Wrap every case-insensitive literal occurrence of query in a mark tag.
    
    The query is escaped before compiling, so pattern metacharacters in user
    input are matched literally and never raise.
    
    Args:
        text: Text to highlight in
        query: Literal text to highlight
        css_class: CSS class placed on each mark tag
        
    Returns:
        Text with matches wrapped as ``<mark class="...">match</mark>``
    """
    if not text or not isinstance(text, str):
        return ""
    if not query or not isinstance(query, str):
        return text
    
    pattern = re.compile(f"({re.escape(query)})", re.IGNORECASE)
    return pattern.sub(lambda match: f'<mark class="{css_class}">{match.group(1)}</mark>', text)
