"""Unit tests for the inverted index."""

import pytest
from record_search.core.index import SearchIndex, create_index, search_index
from record_search.core.normalizer import TextNormalizer


class TestCreateIndex:
    """Test cases for create_index."""
    
    @pytest.fixture
    def items(self):
        """Sample threat-actor records."""
        return [
            {"name": "Lazarus Group", "aliases": ["Hidden Cobra"]},
            {"name": "APT29", "aliases": ["Cozy Bear"]},
            {"name": "Cobalt Group"},
        ]
    
    @pytest.fixture
    def index(self, items):
        """Index over name and aliases."""
        return create_index(items, ["name", "aliases"])
    
    def test_token_postings(self, index):
        """Test token to position mapping."""
        assert index.tokens["group"] == {0, 2}
        assert index.tokens["cobra"] == {0}
        assert index.tokens["apt29"] == {1}
        assert "cobalt" in index.tokens
    
    def test_item_tokens(self, index):
        """Test position to token mapping."""
        assert index.item_tokens[0] == {"lazarus", "group", "hidden", "cobra"}
        assert index.item_tokens[2] == {"cobalt", "group"}
    
    def test_keeps_items_and_fields(self, index, items):
        """Test that the index holds the original records and fields."""
        assert index.items is items
        assert index.fields == ["name", "aliases"]
        assert len(index) == 3
    
    def test_record_without_tokens(self):
        """Test that records producing no tokens still get an entry."""
        index = create_index([{"name": "!"}, {}], ["name"])
        
        assert index.item_tokens == {0: set(), 1: set()}
        assert index.tokens == {}
    
    def test_fields_tokenized_separately(self):
        """Test that tokens never span two field values."""
        index = create_index([{"a": "ab", "b": "cd"}], ["a", "b"])
        
        assert set(index.tokens) == {"ab", "cd"}
    
    def test_get_stats(self, index):
        """Test index statistics."""
        stats = index.get_stats()
        
        assert stats["total_items"] == 3
        assert stats["total_fields"] == 2
        assert stats["total_tokens"] == 8
        assert stats["total_postings"] == 9
    
    def test_empty_items(self):
        """Test building over nothing."""
        index = create_index(None, ["name"])
        
        assert index.items == []
        assert search_index(index, "apt") == []
    
    def test_custom_accessor(self):
        """Test indexing records through a caller-supplied accessor."""
        rows = [("APT28", "Russia"), ("Lazarus Group", "North Korea")]
        columns = {"name": 0, "country": 1}
        
        index = create_index(rows, ["country"], accessor=lambda row, field: row[columns[field]])
        
        assert search_index(index, "korea") == [rows[1]]


class TestSearchIndex:
    """Test cases for search_index."""
    
    @pytest.fixture
    def items(self):
        """Sample threat-actor records."""
        return [
            {"name": "Lazarus Group", "aliases": ["Hidden Cobra"]},
            {"name": "APT29", "aliases": ["Cozy Bear"]},
            {"name": "Cobalt Group"},
        ]
    
    @pytest.fixture
    def index(self, items):
        """Index over name and aliases."""
        return create_index(items, ["name", "aliases"])
    
    def test_single_token(self, index, items):
        """Test a single exact token."""
        assert search_index(index, "group") == [items[0], items[2]]
    
    def test_prefix_matches_several_tokens(self, index, items):
        """Test that one query token can match several indexed tokens."""
        assert search_index(index, "cob") == [items[0], items[2]]
    
    def test_substring_match(self, index, items):
        """Test containment inside an indexed token."""
        assert search_index(index, "29") == [items[1]]
    
    def test_tokens_are_intersected(self, index, items):
        """Test AND semantics across query tokens."""
        assert search_index(index, "hidden group") == [items[0]]
        assert search_index(index, "cob group") == [items[0], items[2]]
        assert search_index(index, "lazarus cozy") == []
    
    def test_case_insensitive(self, index, items):
        """Test that query casing does not matter."""
        assert search_index(index, "LAZARUS") == [items[0]]
    
    @pytest.mark.parametrize("query", ["", None, "!!", "a"])
    def test_tokenless_query_returns_everything(self, index, items, query):
        """Test queries with no usable tokens."""
        assert search_index(index, query) == items
    
    def test_no_match(self, index):
        """Test a token absent from the index."""
        assert search_index(index, "sandworm") == []
    
    def test_index_not_mutated_by_lookups(self, index):
        """Test that lookups leave the token maps untouched."""
        before = {token: set(positions) for token, positions in index.tokens.items()}
        search_index(index, "group cob")
        
        assert index.tokens == before
    
    def test_index_uses_its_normalizer(self, items):
        """Test that the normalizer used at build time tokenizes queries."""
        index = create_index(items, ["name"], normalizer=TextNormalizer(min_token_length=4))
        
        assert isinstance(index, SearchIndex)
        assert "apt29" in index.tokens
        # "apt" is shorter than the minimum, so the query has no tokens
        assert search_index(index, "apt") == items
