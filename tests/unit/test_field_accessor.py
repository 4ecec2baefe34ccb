"""Unit tests for field path resolution."""

from types import SimpleNamespace

import pytest
from record_search.core.field_accessor import as_records, get_field_value


class TestGetFieldValue:
    """Test cases for get_field_value."""
    
    @pytest.fixture
    def record(self):
        """Sample threat-actor record."""
        return {
            "name": "APT29",
            "aliases": ["Cozy Bear", "The Dukes"],
            "meta": {"country": "Russia", "first_seen": 2008, "sponsor": None},
            "tags": ["espionage", None, "government"],
        }
    
    def test_top_level_field(self, record):
        """Test a plain top-level field."""
        assert get_field_value(record, "name") == "APT29"
    
    def test_nested_field(self, record):
        """Test dot-path traversal."""
        assert get_field_value(record, "meta.country") == "Russia"
    
    def test_array_joined_with_spaces(self, record):
        """Test that list values are space-joined."""
        assert get_field_value(record, "aliases") == "Cozy Bear The Dukes"
    
    def test_none_elements_join_as_empty(self, record):
        """Test that None list elements become empty strings."""
        assert get_field_value(record, "tags") == "espionage  government"
    
    def test_scalar_stringified(self, record):
        """Test that non-string scalars are stringified."""
        assert get_field_value(record, "meta.first_seen") == "2008"
        assert get_field_value({"count": 0}, "count") == "0"
    
    @pytest.mark.parametrize("path", ["missing", "meta.missing", "meta.sponsor", "meta.sponsor.name", "name.first"])
    def test_missing_or_null_paths(self, record, path):
        """Test that absent and null segments resolve to an empty string."""
        assert get_field_value(record, path) == ""
    
    def test_list_position_segment(self, record):
        """Test numeric segments indexing into lists."""
        assert get_field_value(record, "aliases.1") == "The Dukes"
        assert get_field_value(record, "aliases.5") == ""
    
    def test_object_attributes(self):
        """Test records that are plain objects rather than mappings."""
        record = SimpleNamespace(name="Lazarus Group", meta=SimpleNamespace(country="North Korea"))
        
        assert get_field_value(record, "name") == "Lazarus Group"
        assert get_field_value(record, "meta.country") == "North Korea"
        assert get_field_value(record, "meta.missing") == ""
    
    def test_empty_inputs(self, record):
        """Test missing record or path."""
        assert get_field_value(None, "name") == ""
        assert get_field_value(record, "") == ""
    
    def test_record_not_mutated(self, record):
        """Test that lookups leave the record untouched."""
        before = repr(record)
        get_field_value(record, "meta.missing.deeper")
        
        assert repr(record) == before


class TestAsRecords:
    """Test cases for as_records."""
    
    def test_list_returned_as_is(self):
        """Test that lists pass through unchanged."""
        items = [{"name": "APT29"}]
        
        assert as_records(items) is items
    
    def test_generator_materialized(self):
        """Test that other iterables become lists."""
        assert as_records(item for item in [1, 2]) == [1, 2]
    
    @pytest.mark.parametrize("items", [None, "apt29", {"name": "APT29"}, 42])
    def test_non_collections_are_empty(self, items):
        """Test that non-collections degrade to an empty sequence."""
        assert as_records(items) == []
