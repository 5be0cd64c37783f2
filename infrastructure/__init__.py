"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains:
- Configuration loading (YAML, environment)
- Observability (logging)
- Filesystem checks

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    AppConfig,
    RenderConfig,
    load_app_config,
    load_tree_definition,
)

__all__ = [
    "load_app_config",
    "load_tree_definition",
    "AppConfig",
    "RenderConfig",
]
