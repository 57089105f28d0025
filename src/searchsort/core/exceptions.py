"""
Custom exceptions for the search sorting helpers.

This module defines the exceptions raised by the few operations in the package
that validate their input. The sorting helpers themselves (field selection and
directive reversal) never raise; they degrade to a pass-through or a default
branch instead.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when an index pattern document does not match the
    expected structure, such as a missing field name or a non-boolean
    ``sortable`` flag.

    Examples:
        * Field entry without a name
        * Sortable flag given as a string
        * Fields not provided as a list
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class QueryError(Exception):
    """
    Raised when sort criteria for a query are invalid.

    Examples:
        * Unknown sort direction
        * Sort directive naming zero or several fields
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Empty score field name
        * Empty meta field name
    """
