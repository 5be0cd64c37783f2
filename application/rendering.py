"""Nested markup rendering for navigation menus."""

import html
from collections.abc import Mapping, Sequence
from typing import Any

from domain.taxonomy.node import Node
from domain.taxonomy.paths import build_path
from domain.taxonomy.walker import walk
from infrastructure.config.models import RenderConfig, canonical_render_keys


def _resolve_options(
    options: RenderConfig | Mapping[str, Any] | None,
    base: RenderConfig | None,
) -> RenderConfig:
    base = base or RenderConfig()
    if options is None:
        return base
    if isinstance(options, RenderConfig):
        return options
    overrides = canonical_render_keys({k: v for k, v in options.items() if v is not None})
    return RenderConfig.model_validate({**base.model_dump(), **overrides})


def render(
    roots: Sequence[Node],
    options: RenderConfig | Mapping[str, Any] | None = None,
    max_depth: int | None = None,
    base: RenderConfig | None = None,
) -> str:
    """
    Build nested list markup for the tree.

    Each node becomes
        <li class="sid_<id>"><a href="<start_path>/path/to/parent/<slug>" title="View all under <slug>">label</a>...</li>
    and each nesting level is wrapped in <ul class="level-<n>">...</ul>.

    Args:
        roots: Root nodes to render
        options: RenderConfig or a mapping of its fields
        max_depth: Optional depth bound passed through to the walker
        base: Settings that mapping options are merged onto (default: RenderConfig defaults)

    Returns:
        The concatenated markup
    """
    cfg = _resolve_options(options, base)
    parts: list[str] = []
    esc = html.escape

    def on_node_start(node: Node) -> None:
        slug = node.slug
        slug_text = "" if slug is None else str(slug)
        label = node.data if node.data else slug_text
        href = f"{cfg.start_path}{build_path(roots, node.id)}{slug_text}"
        parts.append(f'<{cfg.inner_tag} class="{esc(cfg.item_class_prefix + str(node.id))}">')
        parts.append(f'<a href="{esc(href)}" title="View all under {esc(slug_text)}">{esc(str(label))}</a>')

    def on_node_end(_node: Node) -> None:
        parts.append(f"</{cfg.inner_tag}>")

    def on_level_start(level: int) -> None:
        parts.append(f'<{cfg.outer_tag} class="{esc(cfg.level_class_prefix)}{level}">')

    def on_level_end(_level: int) -> None:
        parts.append(f"</{cfg.outer_tag}>")

    walk(
        roots,
        {
            "on_node_start": on_node_start,
            "on_node_end": on_node_end,
            "on_level_start": on_level_start,
            "on_level_end": on_level_end,
        },
        max_depth=max_depth,
    )
    return "".join(parts)
