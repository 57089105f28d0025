"""
Sortable field selection for search queries.

Given an index pattern and an ordered list of candidate field names, these
helpers pick the fields that may appear in a sort clause. A candidate is
sortable if it is a meta field or if the index pattern lists it with its
``sortable`` flag set. Unknown fields are simply not sortable.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from ...config import SortingConfig, resolve_config
from ...core.types import MappingFieldLookup, SortableFieldLookup

logger = logging.getLogger(__name__)

SchemaLike = Union[SortableFieldLookup, Mapping[str, Any]]


def as_field_lookup(schema: SchemaLike) -> SortableFieldLookup:
    """Return the schema as a SortableFieldLookup, wrapping plain mappings."""
    if isinstance(schema, SortableFieldLookup):
        return schema
    return MappingFieldLookup(schema)


def is_meta_field(field_name: str, config: Optional[SortingConfig] = None) -> bool:
    """Return True if the field is sortable without an index pattern entry."""
    return field_name in resolve_config(config).meta_field_names


def get_sortable_fields(
    schema: SchemaLike,
    field_names: Iterable[str],
    config: Optional[SortingConfig] = None,
) -> List[str]:
    """
    Return every sortable candidate, keeping the candidates' order.

    Args:
        schema: Index pattern, any SortableFieldLookup, or a mapping of field
            name to metadata carrying a ``sortable`` flag
        field_names: Candidate field names in order of preference
        config: Optional configuration overriding the meta field set

    Returns:
        List of candidates that are meta fields or sortable in the schema
    """
    lookup = as_field_lookup(schema)
    meta_field_names = resolve_config(config).meta_field_names
    return [
        field_name
        for field_name in field_names
        if field_name in meta_field_names or lookup.is_sortable(field_name)
    ]


def get_first_sortable_field(
    schema: SchemaLike,
    field_names: Iterable[str],
    config: Optional[SortingConfig] = None,
) -> Optional[str]:
    """
    Return the first sortable candidate field name.

    Args:
        schema: Index pattern, any SortableFieldLookup, or a mapping of field
            name to metadata carrying a ``sortable`` flag
        field_names: Candidate field names in order of preference
        config: Optional configuration overriding the meta field set

    Returns:
        The first candidate that is a meta field or sortable in the schema,
        or None if no candidate qualifies

    Example:
        >>> schema = {"a": {"sortable": False}, "b": {"sortable": True}}
        >>> get_first_sortable_field(schema, ["a", "_doc", "b"])
        '_doc'
    """
    lookup = as_field_lookup(schema)
    meta_field_names = resolve_config(config).meta_field_names
    for field_name in field_names:
        if field_name in meta_field_names or lookup.is_sortable(field_name):
            return field_name
    logger.debug("No sortable field among the candidates")
    return None
