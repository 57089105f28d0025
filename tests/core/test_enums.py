"""
Tests for sort enums and field lookups.
"""

import pytest

from searchsort import get_first_sortable_field
from searchsort.core.enums import SCORE_FIELD_NAME, MetaField, SortOrder
from searchsort.core.types import MappingFieldLookup, SortableFieldLookup
from searchsort.schema import FieldSpec, IndexPattern


def test_sort_order_values():
    """Test sort order tokens compare equal to plain strings."""
    assert SortOrder.ASC == "asc"
    assert SortOrder.DESC == "desc"
    assert SortOrder("desc") is SortOrder.DESC


def test_sort_order_reverse():
    """Test reversing a sort order."""
    assert SortOrder.ASC.reverse() is SortOrder.DESC
    assert SortOrder.DESC.reverse() is SortOrder.ASC


def test_meta_field_names():
    """Test the set of meta field names."""
    assert {meta.value for meta in MetaField} == {"_seq_no", "_doc", "_uid"}
    assert SCORE_FIELD_NAME == "_score"


def test_mapping_field_lookup_with_dicts():
    """Test mapping lookup over plain metadata dictionaries."""
    lookup = MappingFieldLookup({"a": {"sortable": True}, "b": {"sortable": False}, "c": {}})

    assert isinstance(lookup, SortableFieldLookup)
    assert lookup.is_sortable("a")
    assert not lookup.is_sortable("b")
    assert not lookup.is_sortable("c")
    assert not lookup.is_sortable("missing")


def test_mapping_field_lookup_with_objects():
    """Test mapping lookup over objects exposing a sortable attribute."""
    lookup = MappingFieldLookup(
        {"a": FieldSpec(name="a", sortable=True), "b": FieldSpec(name="b"), "c": object()}
    )

    assert lookup.is_sortable("a")
    assert not lookup.is_sortable("b")
    assert not lookup.is_sortable("c")


def test_mapping_field_lookup_accepts_truthy_flag():
    """Test truthy flags count as sortable, falsy ones do not."""
    lookup = MappingFieldLookup(
        {
            "a": {"sortable": 1},
            "b": {"sortable": "yes"},
            "c": {"sortable": 0},
            "d": {"sortable": None},
        }
    )

    assert lookup.is_sortable("a")
    assert lookup.is_sortable("b")
    assert not lookup.is_sortable("c")
    assert not lookup.is_sortable("d")


@pytest.mark.parametrize("flag", [1, 0, "yes", "", None, True, False])
def test_mapping_lookup_agrees_with_index_pattern(flag):
    """Test a flag means the same in a plain mapping and an index pattern."""
    mapping_lookup = MappingFieldLookup({"a": {"sortable": flag}})
    pattern = IndexPattern(fields=[FieldSpec(name="a", sortable=flag)])

    assert mapping_lookup.is_sortable("a") is pattern.is_sortable("a")
    assert get_first_sortable_field({"a": {"sortable": flag}}, ["a"]) == get_first_sortable_field(
        pattern, ["a"]
    )
