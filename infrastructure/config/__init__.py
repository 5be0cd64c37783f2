"""
Configuration management: models, loading, and validation.

Handles:
- AppConfig: Main application configuration
- RenderConfig / EngineConfig: markup and engine settings
- Tree definition loading from YAML
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_app_config,
    load_tree_definition,
)
from infrastructure.config.models import (
    # Main config
    AppConfig,
    # Section configs
    EngineConfig,
    RenderConfig,
)

__all__ = [
    # Main config (most commonly used)
    "AppConfig",
    "load_app_config",
    # Sections
    "RenderConfig",
    "EngineConfig",
    # Loaders
    "load_tree_definition",
]
