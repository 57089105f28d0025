"""
Sorting criteria for search queries.

This module provides the SearchSort value object, enabling:
- Field-based sorting
- Direction control (ascending/descending)
- Conversion to and from Elasticsearch sort directives
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ...config import SortingConfig, resolve_config
from ...core.enums import SortOrder
from ...core.exceptions import QueryError
from .directives import (
    FieldMapDirective,
    FieldNameDirective,
    parse_sort_directive,
    reverse_sort_direction,
)


@dataclass(frozen=True)
class SearchSort:
    """
    Sorting criteria for search results.

    This class defines how search results should be ordered, specifying
    both the field to sort by and the sort direction.

    Attributes:
        field (str): The field to sort results by
        direction (str): Sort direction ("asc" for ascending, "desc" for descending)

    Example uses:
        - Sort by time: SearchSort(field="@timestamp", direction="desc")
        - Sort by relevance: SearchSort(field="_score", direction="desc")
        - Tie breaker: SearchSort(field="_doc", direction="asc")
    """

    field: str
    direction: str = SortOrder.ASC.value

    def validate(self) -> None:
        """
        Validate sort configuration.

        Raises:
            QueryError: If the field name is empty or the direction is invalid
        """
        if not isinstance(self.field, str) or not self.field:
            raise QueryError("Sort field must be a non-empty string")
        if self.direction not in (SortOrder.ASC.value, SortOrder.DESC.value):
            raise QueryError(f"Invalid sort direction: {self.direction}")

    def reversed(self) -> "SearchSort":
        """Return the same criteria with the direction flipped."""
        return SearchSort(field=self.field, direction=reverse_sort_direction(self.direction))

    def to_sort_directive(self) -> Dict[str, str]:
        """
        Convert sort criteria to an object-form sort directive.

        Example:
            SearchSort(field="@timestamp", direction="desc").to_sort_directive()
            returns: {"@timestamp": "desc"}
        """
        return {self.field: self.direction}

    @classmethod
    def from_sort_directive(
        cls,
        sort_directive: Any,
        config: Optional[SortingConfig] = None,
    ) -> "SearchSort":
        """
        Build sort criteria from a single-field sort directive.

        A bare field name sorts ascending, except the score field which
        Elasticsearch sorts descending by default.

        Args:
            sort_directive: Directive in short or object form naming one field
            config: Optional configuration overriding the score field name

        Returns:
            Validated SearchSort

        Raises:
            QueryError: If the directive does not name exactly one field or its
                direction is invalid
        """
        parsed = parse_sort_directive(sort_directive)

        if isinstance(parsed, FieldNameDirective):
            if parsed.field_name == resolve_config(config).score_field_name:
                sort = cls(field=parsed.field_name, direction=SortOrder.DESC.value)
            else:
                sort = cls(field=parsed.field_name)
        elif isinstance(parsed, FieldMapDirective):
            if len(parsed.field_map) != 1:
                raise QueryError(
                    f"Sort directive must name exactly one field, got {len(parsed.field_map)}"
                )
            ((field_name, direction),) = parsed.field_map.items()
            if isinstance(direction, Mapping):
                direction = direction.get("order", SortOrder.ASC.value)
            sort = cls(field=field_name, direction=direction)
        else:
            raise QueryError(f"Unsupported sort directive: {sort_directive!r}")

        sort.validate()
        return sort
