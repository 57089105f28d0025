"""
Index pattern models describing the queryable fields of a dataset.

This module provides a read-only view of an index pattern as used by the
sorting helpers. It supports:
- Field metadata (type and capability flags)
- Lookup of fields by name
- Loading an index pattern from a JSON-compatible document, validated against
  a JSON schema

Only the ``sortable`` flag matters to the sorting helpers; the other flags are
carried so that a loaded pattern round-trips through ``to_dict``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

INDEX_PATTERN_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "time_field_name": {"type": ["string", "null"]},
        "fields": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "type": {"type": "string"},
                    "sortable": {"type": "boolean"},
                    "searchable": {"type": "boolean"},
                    "aggregatable": {"type": "boolean"},
                },
                "required": ["name"],
            },
        },
    },
    "required": ["fields"],
}


@dataclass(frozen=True)
class FieldSpec:
    """
    Metadata for a single index pattern field.

    Attributes:
        name (str): Field name as used in queries
        type (str): Field type reported by the mapping ("string", "date", ...)
        sortable (bool): Whether the field may appear in a sort clause
        searchable (bool): Whether the field is indexed
        aggregatable (bool): Whether the field supports aggregations
    """

    name: str
    type: str = "unknown"
    sortable: bool = False
    searchable: bool = False
    aggregatable: bool = False

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("field name must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "sortable": self.sortable,
            "searchable": self.searchable,
            "aggregatable": self.aggregatable,
        }


class IndexPattern:
    """
    Read-only collection of field specs for one index pattern.

    Implements ``SortableFieldLookup`` so it can be passed directly to the
    sortable-field selector.

    Attributes:
        title (str): Index pattern title, e.g. ``"logstash-*"``
        time_field_name (Optional[str]): Name of the primary time field
        by_name (Dict[str, FieldSpec]): Field specs keyed by field name
    """

    def __init__(
        self,
        fields: Iterable[FieldSpec] = (),
        title: str = "",
        time_field_name: Optional[str] = None,
    ):
        self.title = title
        self.time_field_name = time_field_name
        self.by_name: Dict[str, FieldSpec] = {}
        for spec in fields:
            # Later entries win, matching how a refreshed field list replaces old ones
            self.by_name[spec.name] = spec

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self.by_name.values())

    def __len__(self) -> int:
        return len(self.by_name)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self.by_name

    def get_field(self, field_name: str) -> Optional[FieldSpec]:
        """Return the field spec for a name, or None if the field is unknown."""
        return self.by_name.get(field_name)

    def is_sortable(self, field_name: str) -> bool:
        spec = self.by_name.get(field_name)
        return spec is not None and bool(spec.sortable)

    def sortable_field_names(self) -> List[str]:
        """Return the names of all sortable fields in declaration order."""
        return [spec.name for spec in self.by_name.values() if spec.sortable]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IndexPattern":
        """
        Build an index pattern from a JSON-compatible document.

        Args:
            data: Document with a ``fields`` list and optional ``title`` and
                ``time_field_name``

        Returns:
            IndexPattern with one FieldSpec per field entry

        Raises:
            ValidationError: If the document does not match INDEX_PATTERN_SCHEMA

        Example:
            >>> pattern = IndexPattern.from_dict(
            ...     {"title": "logs-*", "fields": [{"name": "@timestamp", "sortable": True}]}
            ... )
            >>> pattern.is_sortable("@timestamp")
            True
        """
        try:
            validate(instance=data, schema=INDEX_PATTERN_SCHEMA)
        except JsonSchemaError as e:
            logger.error(f"Invalid index pattern document: {e.message}")
            raise ValidationError(f"Index pattern schema validation failed: {e.message}") from e

        fields = [
            FieldSpec(
                name=entry["name"],
                type=entry.get("type", "unknown"),
                sortable=entry.get("sortable", False),
                searchable=entry.get("searchable", False),
                aggregatable=entry.get("aggregatable", False),
            )
            for entry in data["fields"]
        ]
        pattern = cls(
            fields=fields,
            title=data.get("title", ""),
            time_field_name=data.get("time_field_name"),
        )
        logger.debug(f"Loaded index pattern {pattern.title!r} with {len(pattern)} fields")
        return pattern

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "time_field_name": self.time_field_name,
            "fields": [spec.to_dict() for spec in self.by_name.values()],
        }

    def __repr__(self) -> str:
        return f"IndexPattern(title={self.title!r}, fields={len(self.by_name)})"
