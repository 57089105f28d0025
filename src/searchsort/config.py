"""
Configuration for the sorting helpers.

The defaults match Elasticsearch's conventions and are what every public
function uses when no configuration is passed.
"""

from typing import FrozenSet, Iterable, Optional

from .core.enums import SCORE_FIELD_NAME, MetaField
from .core.exceptions import ConfigurationError


class SortingConfig:
    """
    Configuration for sortable-field selection and directive reversal.

    Attributes:
        meta_field_names: Field names that are sortable without being listed
            in the index pattern
        score_field_name: Pseudo-field whose natural sort order is descending
    """

    def __init__(
        self,
        meta_field_names: Optional[Iterable[str]] = None,
        score_field_name: str = SCORE_FIELD_NAME,
    ):
        if meta_field_names is None:
            meta_field_names = [meta.value for meta in MetaField]
        elif isinstance(meta_field_names, str):
            # A single name, not an iterable of characters
            meta_field_names = [meta_field_names]
        self.meta_field_names: FrozenSet[str] = frozenset(meta_field_names)
        self.score_field_name = score_field_name
        self.validate()

    def validate(self) -> None:
        """
        Validate configuration values.

        Called on construction and again whenever a configuration is handed to
        one of the sorting helpers, so attributes changed afterwards are checked
        too.

        Raises:
            ConfigurationError: If the score field or a meta field name is empty,
                or the meta field names are not a collection of names
        """
        if not isinstance(self.score_field_name, str) or not self.score_field_name:
            raise ConfigurationError("score_field_name must be a non-empty string")
        if isinstance(self.meta_field_names, str):
            raise ConfigurationError("meta_field_names must be a collection of names, not a string")
        for name in self.meta_field_names:
            if not isinstance(name, str) or not name:
                raise ConfigurationError(f"Invalid meta field name: {name!r}")

    def __repr__(self) -> str:
        return (
            f"SortingConfig(meta_field_names={sorted(self.meta_field_names)!r}, "
            f"score_field_name={self.score_field_name!r})"
        )


DEFAULT_CONFIG = SortingConfig()


def resolve_config(config: Optional[SortingConfig]) -> SortingConfig:
    """
    Return the given configuration, or the default one when None.

    Raises:
        ConfigurationError: If the given configuration is invalid
    """
    if config is None:
        return DEFAULT_CONFIG
    config.validate()
    return config
