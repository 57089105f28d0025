"""
searchsort - Sort helpers for Elasticsearch search results

This package provides the small, stateless helpers a search-results UI needs
to work with Elasticsearch sort clauses:

- Selecting the first sortable field from a list of candidates
- Reversing sort directives, including the inverted default of ``_score``
- Loading index patterns that describe which fields are sortable
"""

__version__ = "0.1.0"
__author__ = "searchsort Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("searchsort requires Python 3.9 or higher")

from .config import SortingConfig
from .core.enums import MetaField, SortOrder
from .schema import FieldSpec, IndexPattern
from .search.query import (
    SearchSort,
    get_first_sortable_field,
    get_sortable_fields,
    reverse_sort_direction,
    reverse_sort_directive,
    reverse_sort_directives,
)

__all__ = [
    "FieldSpec",
    "IndexPattern",
    "MetaField",
    "SearchSort",
    "SortOrder",
    "SortingConfig",
    "get_first_sortable_field",
    "get_sortable_fields",
    "reverse_sort_direction",
    "reverse_sort_directive",
    "reverse_sort_directives",
]
