"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- taxonomy: node model, normalization, lookup, path reconstruction and traversal
"""

from domain.taxonomy import Node, RequireFieldError, TaxonomyError, Tree

__all__ = [
    "Node",
    "Tree",
    "TaxonomyError",
    "RequireFieldError",
]
