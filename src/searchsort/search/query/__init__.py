"""
Sort models and helpers for search queries.
"""

from .directives import (
    FieldMapDirective,
    FieldNameDirective,
    OtherDirective,
    ParsedSortDirective,
    parse_sort_directive,
    reverse_sort_direction,
    reverse_sort_directive,
    reverse_sort_directives,
)
from .fields import get_first_sortable_field, get_sortable_fields, is_meta_field
from .sorting import SearchSort

__all__ = [
    "FieldMapDirective",
    "FieldNameDirective",
    "OtherDirective",
    "ParsedSortDirective",
    "SearchSort",
    "get_first_sortable_field",
    "get_sortable_fields",
    "is_meta_field",
    "parse_sort_directive",
    "reverse_sort_direction",
    "reverse_sort_directive",
    "reverse_sort_directives",
]
