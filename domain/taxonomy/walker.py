"""
Depth-first walker with level and node enter/exit hooks.

Hook names follow the Walker-class convention:
- on_level_start(level) / on_level_end(level): a nesting level opens/closes
- on_node_start(node) / on_node_end(node): a node is entered/left

Root level is 1. Hooks may be supplied as a mapping of name -> callable or as
an object exposing methods with these names; anything else is ignored.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from domain.taxonomy.node import Node

HOOK_NAMES = ("on_level_start", "on_level_end", "on_node_start", "on_node_end")


def _noop(*_args: Any) -> None:
    return None


def _resolve_hooks(hooks: Any) -> dict[str, Callable[..., Any]]:
    resolved: dict[str, Callable[..., Any]] = {}
    for name in HOOK_NAMES:
        fn = hooks.get(name) if isinstance(hooks, Mapping) else getattr(hooks, name, None)
        resolved[name] = fn if callable(fn) else _noop
    return resolved


def walk(roots: Sequence[Node], hooks: Any = None, max_depth: int | None = None) -> None:
    """
    Visit the tree depth-first, firing hooks in pre/post order.

    When a level equals `max_depth`, the first node at that level gets its
    `on_node_start` and the level is abandoned at once: no `on_node_end` for
    that node, no remaining siblings and no `on_level_end` for the level.
    """
    h = _resolve_hooks(hooks)

    def visit(node: Node, level: int) -> None:
        if not node.children:
            return
        h["on_level_start"](level)
        for child in node.children:
            h["on_node_start"](child)
            if max_depth == level:
                return
            visit(child, level + 1)
            h["on_node_end"](child)
        h["on_level_end"](level)

    h["on_level_start"](1)
    for root in roots:
        if root.data:
            h["on_node_start"](root)
        visit(root, 2)
        if root.data:
            h["on_node_end"](root)
    h["on_level_end"](1)
