"""Core enums, exceptions and protocols."""

from .enums import SCORE_FIELD_NAME, MetaField, SortOrder
from .exceptions import ConfigurationError, QueryError, ValidationError
from .types import (
    MappingFieldLookup,
    SortableFieldLookup,
    SortDirection,
    SortDirective,
    SortDirectiveObject,
    SortOptions,
)

__all__ = [
    "ConfigurationError",
    "MappingFieldLookup",
    "MetaField",
    "QueryError",
    "SCORE_FIELD_NAME",
    "SortableFieldLookup",
    "SortDirection",
    "SortDirective",
    "SortDirectiveObject",
    "SortOptions",
    "SortOrder",
    "ValidationError",
]
