"""
Core type definitions and protocols.

This module provides the type aliases for sort directives and the protocol that
decouples sortable-field selection from any concrete schema representation.
"""

from typing import Any, Dict, Mapping, Protocol, Union, runtime_checkable

SortDirection = str
SortOptions = Mapping[str, Any]
SortDirectiveObject = Dict[str, Union[SortDirection, SortOptions]]
SortDirective = Union[str, SortDirectiveObject]


@runtime_checkable
class SortableFieldLookup(Protocol):
    """Protocol defining the only schema capability the selector needs."""

    def is_sortable(self, field_name: str) -> bool:
        """Return True if the schema marks the field as sortable."""
        ...


class MappingFieldLookup:
    """
    Adapt a plain mapping of field metadata to ``SortableFieldLookup``.

    Metadata values may be mappings carrying a ``sortable`` key or objects with
    a ``sortable`` attribute. Missing entries and missing flags count as not
    sortable.
    """

    def __init__(self, fields: Mapping[str, Any]):
        self._fields = fields

    def is_sortable(self, field_name: str) -> bool:
        spec = self._fields.get(field_name)
        if spec is None:
            return False
        if isinstance(spec, Mapping):
            return bool(spec.get("sortable"))
        return bool(getattr(spec, "sortable", False))
