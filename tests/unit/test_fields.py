"""Unit tests for field accessors."""

from dataclasses import dataclass
from typing import Optional

from fuzzy_record_search.core.fields import describe_fields, field, resolve_fields


@dataclass(frozen=True)
class Animal:
    id: int
    title: str
    description: Optional[str] = None


class TestField:
    """Test cases for field()."""
    
    def test_reads_mapping_key(self):
        assert field("title")({"title": "Blue Whale"}) == "Blue Whale"
    
    def test_reads_attribute(self):
        assert field("title")(Animal(1, "Red Panda")) == "Red Panda"
    
    def test_missing_field_is_none(self):
        assert field("title")({"name": "x"}) is None
        assert field("colour")(Animal(1, "Red Panda")) is None
    
    def test_non_text_is_none(self):
        assert field("id")({"id": 7}) is None
        assert field("description")(Animal(1, "Red Panda")) is None
    
    def test_name_is_kept(self):
        accessor = field("title")
        assert accessor.field_name == "title"
        assert accessor.__name__ == "field_title"


class TestResolveFields:
    """Test cases for resolve_fields()."""
    
    def test_mixes_names_and_callables(self):
        def upper_title(record):
            return record["title"].upper()
        
        accessors = resolve_fields(["title", upper_title])
        record = {"title": "Blue Whale"}
        
        assert [accessor(record) for accessor in accessors] == ["Blue Whale", "BLUE WHALE"]
    
    def test_empty(self):
        assert resolve_fields([]) == []
        assert resolve_fields(None) == []
    
    def test_describe(self):
        def label(record):
            return None
        
        assert describe_fields(resolve_fields(["title", label])) == ["title", "label"]
