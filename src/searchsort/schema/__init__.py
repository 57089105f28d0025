"""Index pattern schema models."""

from .index_pattern import INDEX_PATTERN_SCHEMA, FieldSpec, IndexPattern

__all__ = [
    "FieldSpec",
    "INDEX_PATTERN_SCHEMA",
    "IndexPattern",
]
