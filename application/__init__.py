"""
Application layer: Use cases and workflow orchestration.

This layer owns the taxonomy tree and coordinates the pure domain
functions (lookup, paths, traversal) into the engine's operations.
"""

from application.engine import TaxonomyEngine
from application.rendering import render

__all__ = [
    "TaxonomyEngine",
    "render",
]
