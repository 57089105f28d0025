"""
Tests for sortable field selection.
"""

import pytest

from searchsort import SortingConfig, get_first_sortable_field, get_sortable_fields
from searchsort.search.query import is_meta_field


@pytest.fixture
def simple_schema():
    """Fixture providing a plain mapping schema."""
    return {"a": {"sortable": False}, "b": {"sortable": True}}


def test_first_sortable_field_prefers_meta_field(simple_schema):
    """Test a meta field earlier in the candidates wins."""
    assert get_first_sortable_field(simple_schema, ["a", "_doc", "b"]) == "_doc"


def test_first_sortable_field_from_schema(simple_schema):
    """Test a schema-sortable field is selected."""
    assert get_first_sortable_field(simple_schema, ["a", "b", "_doc"]) == "b"


def test_first_sortable_field_none_found(simple_schema):
    """Test None is returned when nothing qualifies."""
    assert get_first_sortable_field(simple_schema, ["a", "missing"]) is None
    assert get_first_sortable_field(simple_schema, []) is None


@pytest.mark.parametrize("meta_field", ["_seq_no", "_doc", "_uid"])
def test_meta_fields_always_sortable(meta_field):
    """Test meta fields are sortable even with an empty schema."""
    assert get_first_sortable_field({}, [meta_field]) == meta_field
    assert is_meta_field(meta_field)


def test_meta_field_marked_unsortable_in_schema():
    """Test schema content cannot make a meta field unsortable."""
    assert get_first_sortable_field({"_doc": {"sortable": False}}, ["_doc"]) == "_doc"


def test_first_sortable_field_with_index_pattern(sample_index_pattern):
    """Test selection against an index pattern."""
    candidates = ["message", "missing", "host.name", "@timestamp"]

    assert get_first_sortable_field(sample_index_pattern, candidates) == "host.name"


def test_first_sortable_field_accepts_generator(simple_schema):
    """Test candidates may be any iterable."""
    candidates = (name for name in ["a", "b"])

    assert get_first_sortable_field(simple_schema, candidates) == "b"


def test_first_sortable_field_does_not_mutate_inputs(simple_schema):
    """Test the inputs are left untouched."""
    candidates = ["a", "b"]
    get_first_sortable_field(simple_schema, candidates)

    assert candidates == ["a", "b"]
    assert simple_schema == {"a": {"sortable": False}, "b": {"sortable": True}}


def test_get_sortable_fields_keeps_order(sample_index_pattern):
    """Test all sortable candidates are returned in order."""
    candidates = ["bytes", "message", "_uid", "missing", "@timestamp"]

    assert get_sortable_fields(sample_index_pattern, candidates) == ["bytes", "_uid", "@timestamp"]


def test_custom_meta_fields():
    """Test a configuration replacing the meta field set."""
    config = SortingConfig(meta_field_names=["_id"])

    assert get_first_sortable_field({}, ["_doc", "_id"], config=config) == "_id"
    assert not is_meta_field("_doc", config=config)
