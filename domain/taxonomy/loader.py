"""Parse a tree definition (pre-loaded YAML/JSON data) into root nodes."""

from typing import Any

from domain.taxonomy.errors import RequireFieldError
from domain.taxonomy.node import Node
from domain.taxonomy.normalizer import DEFAULT_ID_PREFIX, normalize_subtree


def _require_data(node: Node, where: str) -> None:
    if not node.has_data():
        raise RequireFieldError(f"Node at {where} requires data property.")
    for i, child in enumerate(node.children):
        _require_data(child, f"{where}.children[{i}]")


def parse_tree_definition(data: Any, id_prefix: str = DEFAULT_ID_PREFIX) -> list[Node]:
    """
    Parse a pre-loaded tree definition into normalized root nodes.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Accepted shapes:
        - a list of node mappings
        - a mapping with a `tree` or `roots` list

    Each node mapping takes `data`, optional `attributes`, `children` and any extra keys.
    Bare scalars are accepted as leaf nodes.

    Raises:
        ValueError: If the definition has the wrong shape
        RequireFieldError: If any node lacks data
    """
    if data is None:
        return []
    if isinstance(data, dict):
        if "tree" in data:
            data = data["tree"]
        elif "roots" in data:
            data = data["roots"]
        else:
            raise ValueError("tree definition mapping must contain a 'tree' or 'roots' list")
        if data is None:
            return []
    if not isinstance(data, list):
        raise ValueError(f"tree definition must be a list of nodes, got {type(data).__name__}")

    roots: list[Node] = []
    for i, item in enumerate(data):
        if isinstance(item, Node):
            node = item
        elif isinstance(item, dict):
            node = Node.model_validate(item)
        else:
            node = Node(data=item)
        _require_data(node, f"roots[{i}]")
        roots.append(normalize_subtree(node, id_prefix))
    return roots
