"""Taxonomy error types."""


class TaxonomyError(Exception):
    """Base class for taxonomy engine errors."""


class RequireFieldError(TaxonomyError, ValueError):
    """Raised when a node is created or attached without its required `data` field."""

    def __init__(self, message: str = "Node requires data property.") -> None:
        super().__init__(message)
