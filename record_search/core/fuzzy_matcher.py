"""Tiered fuzzy matching of a needle against a haystack string."""

from typing import Iterable, Optional

from ..models.query import MatchResult

EXACT_SCORE = 100.0
PREFIX_SCORE = 90.0
SUBSTRING_BASE_SCORE = 80.0
SUBSTRING_POSITION_PENALTY = 0.5
SUBSTRING_MIN_SCORE = 50.0
WORD_PREFIX_SCORE = 70.0
SUBSEQUENCE_MAX_SCORE = 40.0

# Subsequence points: each matched char earns a base plus a bonus per
# immediately preceding consecutive match.
CHAR_POINTS = 10
CONSECUTIVE_BONUS = 5


class FuzzyMatcher:
    """Scores strings with exact, prefix, substring, word-prefix and subsequence tiers."""
    
    def match(self, needle: str, haystack: str) -> MatchResult:
        """
        Match a needle against a haystack, case-insensitively.
        
        Tiers are tried in fixed priority order and the first one that
        succeeds decides the score.
        
        Args:
            needle: Text being searched for
            haystack: Text being searched in
            
        Returns:
            MatchResult with the winning tier's score
        """
        if not needle or not haystack:
            return self._no_match()
        if not isinstance(needle, str) or not isinstance(haystack, str):
            return self._no_match()
        
        needle = needle.lower()
        haystack = haystack.lower()
        
        if haystack == needle:
            return MatchResult(matched=True, score=EXACT_SCORE, match_type="exact")
        
        if haystack.startswith(needle):
            return MatchResult(matched=True, score=PREFIX_SCORE, match_type="prefix")
        
        position = haystack.find(needle)
        if position != -1:
            score = SUBSTRING_BASE_SCORE - position * SUBSTRING_POSITION_PENALTY
            return MatchResult(
                matched=True,
                score=max(score, SUBSTRING_MIN_SCORE),
                match_type="substring"
            )
        
        if any(word.startswith(needle) for word in haystack.split()):
            return MatchResult(matched=True, score=WORD_PREFIX_SCORE, match_type="word_prefix")
        
        return self._subsequence_match(needle, haystack)
    
    def best_match(self, needle: str, haystacks: Iterable[str]) -> Optional[MatchResult]:
        """
        Find the highest scoring match of a needle across several haystacks.
        
        Args:
            needle: Text being searched for
            haystacks: Candidate strings, e.g. the values of several fields
            
        Returns:
            The best successful MatchResult, or None if nothing matched
        """
        best = None
        for haystack in haystacks:
            if not haystack:
                continue
            result = self.match(needle, haystack)
            if result.matched and (best is None or result.score > best.score):
                best = result
        return best
    
    def _subsequence_match(self, needle: str, haystack: str) -> MatchResult:
        """Score needle characters appearing in order, rewarding consecutive runs."""
        needle_idx = 0
        points = 0
        consecutive = 0
        
        for char in haystack:
            if needle_idx >= len(needle):
                break
            if char == needle[needle_idx]:
                points += CHAR_POINTS + consecutive * CONSECUTIVE_BONUS
                consecutive += 1
                needle_idx += 1
            else:
                consecutive = 0
        
        if needle_idx < len(needle):
            return self._no_match()
        
        max_points = len(needle) * CHAR_POINTS + (len(needle) - 1) * CONSECUTIVE_BONUS
        score = points / max_points * SUBSEQUENCE_MAX_SCORE
        return MatchResult(matched=True, score=score, match_type="subsequence")
    
    @staticmethod
    def _no_match() -> MatchResult:
        return MatchResult(matched=False, score=0.0, match_type="no_match")


_default_matcher = FuzzyMatcher()


def fuzzy_match(needle: str, haystack: str) -> MatchResult:
    """Match a needle against a haystack with the default matcher."""
    return _default_matcher.match(needle, haystack)
