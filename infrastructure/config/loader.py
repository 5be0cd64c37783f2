"""Configuration loading from YAML files."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from domain.taxonomy.loader import parse_tree_definition
from domain.taxonomy.node import Node
from domain.taxonomy.normalizer import DEFAULT_ID_PREFIX
from infrastructure.config.models import AppConfig
from infrastructure.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

# env var suffix -> (section, key); section None means top level
_ENV_OVERRIDES: dict[str, tuple[str | None, str]] = {
    "NAME": (None, "name"),
    "TREE_FILE": (None, "tree_file"),
    "START_PATH": ("render", "start_path"),
    "OUTER_TAG": ("render", "outer_tag"),
    "INNER_TAG": ("render", "inner_tag"),
    "ID_PREFIX": ("engine", "id_prefix"),
    "MAX_DEPTH": ("engine", "max_depth"),
}


def _load_yaml(path: Path) -> Any:
    """Load a YAML file and return the parsed document."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _apply_env(data: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Overlay TAXONOMY_* environment variables onto raw config data."""
    for suffix, (section, key) in _ENV_OVERRIDES.items():
        val = environ.get(f"{ENV_PREFIX}{suffix}")
        if val is None:
            continue
        if section is None:
            data[key] = val
        else:
            block = data.get(section) or {}
            if not isinstance(block, dict):
                raise ValueError(f"Config section '{section}' must be a mapping")
            block[key] = val
            data[section] = block
        logger.debug("Config override from environment: %s%s", ENV_PREFIX, suffix)
    return data


def load_app_config(path: Path | None = None, environ: Mapping[str, str] | None = None) -> AppConfig:
    """
    Load settings YAML (optional) and construct a validated AppConfig.

    Args:
        path: Settings file; None means defaults only
        environ: Environment mapping used for overrides (default: os.environ)

    Raises:
        FileNotFoundError: If `path` is given but does not exist
        ValueError: If the YAML is not a mapping
        pydantic.ValidationError: If values fail validation
    """
    data: dict[str, Any] = {}
    if path is not None:
        loaded = _load_yaml(path)
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError(f"Expected YAML dict in {path}, got {type(loaded)}")
        data = dict(loaded or {})

    data = _apply_env(data, os.environ if environ is None else environ)
    return AppConfig.model_validate(data)


def load_tree_definition(path: Path, id_prefix: str = DEFAULT_ID_PREFIX) -> list[Node]:
    """
    Load a tree definition from YAML.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    data = _load_yaml(path)
    roots = parse_tree_definition(data, id_prefix=id_prefix)
    logger.info("Loaded tree definition from %s (%d roots)", path, len(roots))
    return roots
