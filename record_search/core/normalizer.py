"""Text normalization utilities for consistent token processing."""

import re
from typing import List


class TextNormalizer:
    """Handles lowercasing and ASCII alphanumeric tokenization."""
    
    def __init__(self, min_token_length: int = 2) -> None:
        """
        Initialize the normalizer.
        
        Args:
            min_token_length: Tokens shorter than this are discarded
        """
        self.min_token_length = min_token_length
        
        # Compile regex patterns for performance
        self.non_alnum_regex = re.compile(r'[^a-z0-9\s]')
        self.whitespace_regex = re.compile(r'\s+')
    
    def normalize(self, text: str) -> str:
        """
        Normalize text for token splitting.
        
        Args:
            text: Input text to normalize
            
        Returns:
            Lowercased text with every non-alphanumeric character replaced by a space
        """
        if not text or not isinstance(text, str):
            return ""
        
        return self.non_alnum_regex.sub(' ', text.lower())
    
    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into searchable tokens.
        
        Args:
            text: Input text
            
        Returns:
            List of lowercase alphanumeric tokens, in order of appearance
        """
        normalized = self.normalize(text)
        if not normalized:
            return []
        
        return [
            token for token in self.whitespace_regex.split(normalized)
            if len(token) >= self.min_token_length
        ]


_default_normalizer = TextNormalizer()


def tokenize(text: str) -> List[str]:
    """Tokenize text with the default two-character minimum."""
    return _default_normalizer.tokenize(text)
