"""Configuration models (Pydantic classes)."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain.taxonomy.normalizer import DEFAULT_ID_PREFIX

# Roots sit at level 1; the walker can only stop below them
MIN_MAX_DEPTH = 2

_CAMEL_CASE_KEYS = {"outerTag": "outer_tag", "innerTag": "inner_tag", "startPath": "start_path"}


def canonical_render_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Rename camelCase render option keys to field names; a field name already present wins."""
    out = dict(data)
    for camel, name in _CAMEL_CASE_KEYS.items():
        if camel in out:
            value = out.pop(camel)
            out.setdefault(name, value)
    return out


class RenderConfig(BaseModel):
    """
    Markup rendering options.

    `outerTag` / `innerTag` / `startPath` are accepted as well; unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    outer_tag: str = Field(default="ul", description="List container tag emitted per nesting level.")
    inner_tag: str = Field(default="li", description="Item tag emitted per node.")
    start_path: str = Field(
        default="/#!",
        description="URL prefix for generated links. Set to '' when not using ajax-crawlable hash links.",
    )
    item_class_prefix: str = "sid_"
    level_class_prefix: str = "level-"

    @model_validator(mode="before")
    @classmethod
    def _camel_case_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return canonical_render_keys(data)
        return data

    @field_validator("outer_tag", "inner_tag")
    @classmethod
    def _tag_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("tag names must not be blank")
        return value


class EngineConfig(BaseModel):
    """Engine-wide settings."""

    id_prefix: str = Field(default=DEFAULT_ID_PREFIX, description="Prefix for generated node ids.")
    max_depth: int | None = Field(
        default=None,
        description="Default depth bound for rendering (roots are level 1, so the smallest bound is 2). None renders the whole tree.",
    )

    @field_validator("max_depth")
    @classmethod
    def _depth_bound(cls, value: int | None) -> int | None:
        if value is not None and value < MIN_MAX_DEPTH:
            raise ValueError(f"max_depth must be >= {MIN_MAX_DEPTH}")
        return value


class AppConfig(BaseModel):
    """
    Application configuration.
    - Loaded from configs/taxonomy.yaml (all keys optional)
    - Environment variables (TAXONOMY_*) override file values
    - Consumed by the CLI and the engine factory
    """

    name: str = Field(default="taxonomy", description="Taxonomy name, used in log lines.")
    tree_file: Path | None = Field(default=None, description="Tree definition YAML to seed the engine with.")
    render: RenderConfig = Field(default_factory=RenderConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @model_validator(mode="after")
    def _validate(self) -> "AppConfig":
        if not str(self.name).strip():
            self.name = "taxonomy"
        return self
