"""
Sort directive models and reversal for Elasticsearch-style sort clauses.

A sort directive orders results by one field and comes in two forms:
- Short form: the bare field name, e.g. ``"@timestamp"``
- Object form: a mapping from field name to a direction token
  (``{"@timestamp": "desc"}``) or to an options mapping carrying the token
  under ``"order"`` (``{"@timestamp": {"order": "desc", "mode": "min"}}``)

Reversing a directive is how the surrounding-documents view turns the sort of
its anchor query into the sort of its predecessor query. Reversal never fails:
unknown shapes are passed through unchanged and unknown direction tokens are
normalised to ascending.

The shape of a directive is classified once by ``parse_sort_directive`` into
one of three variants, each of which knows how to reverse itself.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ...config import SortingConfig, resolve_config
from ...core.enums import SortOrder
from ...core.types import SortDirection, SortOptions

logger = logging.getLogger(__name__)

ORDER_KEY = "order"
DIRECTION_TOKENS = tuple(order.value for order in SortOrder)


def reverse_sort_direction(
    sort_direction: Union[SortDirection, SortOptions, None],
) -> Union[SortDirection, Dict[str, Any]]:
    """
    Return the reversed sort direction.

    Args:
        sort_direction: A direction token, or an options mapping holding the
            token under ``"order"``

    Returns:
        For an options mapping, a shallow copy with ``"order"`` reversed.
        For anything else, ``"desc"`` if the value is ``"asc"`` and ``"asc"``
        otherwise.
    """
    if isinstance(sort_direction, Mapping):
        options = dict(sort_direction)
        options[ORDER_KEY] = reverse_sort_direction(sort_direction.get(ORDER_KEY))
        return options

    # Compare strings only; array-like values would answer == element-wise
    if isinstance(sort_direction, str) and sort_direction in DIRECTION_TOKENS:
        return SortOrder(sort_direction).reverse().value
    logger.debug(f"Reversing unrecognised sort direction {sort_direction!r} to 'asc'")
    return SortOrder.ASC.value


@dataclass(frozen=True)
class FieldNameDirective:
    """Short-form directive: a bare field name sorted in its default direction."""

    field_name: str

    def reverse(self, config: Optional[SortingConfig] = None) -> "FieldMapDirective":
        # Elasticsearch sorts _score descending by default, so its reverse is ascending
        if self.field_name == resolve_config(config).score_field_name:
            direction = SortOrder.ASC
        else:
            direction = SortOrder.DESC
        return FieldMapDirective({self.field_name: direction.value})

    def to_value(self) -> str:
        return self.field_name


@dataclass(frozen=True)
class FieldMapDirective:
    """
    Object-form directive: field names mapped to directions or options.

    Instances compare by value but are unhashable, since the field map is a
    plain dict.
    """

    field_map: Dict[str, Any] = field(default_factory=dict)

    __hash__ = None

    def reverse(self, config: Optional[SortingConfig] = None) -> "FieldMapDirective":
        return FieldMapDirective(
            {
                field_name: reverse_sort_direction(direction)
                for field_name, direction in self.field_map.items()
            }
        )

    def to_value(self) -> Dict[str, Any]:
        return dict(self.field_map)


@dataclass(frozen=True)
class OtherDirective:
    """Any value that is neither a field name nor a mapping; left untouched."""

    value: Any = None

    def reverse(self, config: Optional[SortingConfig] = None) -> "OtherDirective":
        return self

    def to_value(self) -> Any:
        return self.value


ParsedSortDirective = Union[FieldNameDirective, FieldMapDirective, OtherDirective]


def parse_sort_directive(sort_directive: Any) -> ParsedSortDirective:
    """
    Classify a raw sort directive by its shape.

    Args:
        sort_directive: Value taken from a sort clause

    Returns:
        FieldNameDirective for a string, FieldMapDirective for a mapping,
        OtherDirective for anything else
    """
    if isinstance(sort_directive, str):
        return FieldNameDirective(sort_directive)
    if isinstance(sort_directive, Mapping):
        return FieldMapDirective(dict(sort_directive))
    return OtherDirective(sort_directive)


def reverse_sort_directive(
    sort_directive: Any,
    config: Optional[SortingConfig] = None,
) -> Any:
    """
    Return a copy of the directive with the sort direction reversed.

    If the directive is the bare score field name, the default direction is
    inverted the same way Elasticsearch does it, giving ascending.

    Args:
        sort_directive: Directive in short or object form
        config: Optional configuration overriding the score field name

    Returns:
        The reversed directive in object form, or the input itself when it is
        neither a string nor a mapping

    Example:
        >>> reverse_sort_directive("@timestamp")
        {'@timestamp': 'desc'}
        >>> reverse_sort_directive({"@timestamp": {"order": "desc", "mode": "min"}})
        {'@timestamp': {'order': 'asc', 'mode': 'min'}}
    """
    config = resolve_config(config)
    parsed = parse_sort_directive(sort_directive)
    if isinstance(parsed, OtherDirective):
        logger.debug(f"Leaving sort directive of type {type(sort_directive).__name__} unchanged")
    return parsed.reverse(config).to_value()


def reverse_sort_directives(
    sort_directives: Iterable[Any],
    config: Optional[SortingConfig] = None,
) -> List[Any]:
    """Reverse every directive of a multi-field sort clause, keeping their order."""
    return [reverse_sort_directive(directive, config) for directive in sort_directives]
