"""
Enumerations for sort directions and special field names.

This module defines the literal tokens that appear in Elasticsearch sort
directives:
- SortOrder: The two direction tokens
- MetaField: Fields that are sortable without appearing in an index pattern
"""

from enum import Enum


class SortOrder(str, Enum):
    """Sort order direction as written in a sort directive."""

    ASC = "asc"
    DESC = "desc"

    def reverse(self) -> "SortOrder":
        """Return the opposite direction."""
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


class MetaField(str, Enum):
    """
    Document meta fields that may always be used for sorting.

    These fields are never listed in an index pattern but Elasticsearch accepts
    them in a sort clause, which makes them useful as tie breakers.
    """

    SEQ_NO = "_seq_no"  # Sequence number of the last write
    DOC = "_doc"  # Index order
    UID = "_uid"  # Type and id (pre 7.0 indices)


SCORE_FIELD_NAME = "_score"
