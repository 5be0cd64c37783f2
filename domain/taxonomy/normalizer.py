"""Node identity, slug and leaf-flag normalization."""

import itertools
import re
import time
from typing import Any

from domain.taxonomy.errors import RequireFieldError
from domain.taxonomy.node import Node

DEFAULT_ID_PREFIX = "tax_"

_id_counter = itertools.count(1)

_WHITESPACE_RE = re.compile(r"\s+")
_ILLEGAL_SLUG_CHARS_RE = re.compile(r"[^a-zA-Z0-9_\-]+")


def generate_id(prefix: str = DEFAULT_ID_PREFIX) -> str:
    """
    Process-unique node id: prefix + monotonic counter + epoch milliseconds.

    Examples:
        >>> generate_id().startswith("tax_")
        True
    """
    return f"{prefix}{next(_id_counter)}{int(time.time() * 1000)}"


def slugify(raw: str) -> str:
    """
    Normalize a label into a URL-safe slug.

    Examples:
        >>> slugify("  My   Cool Data ")
        'my-cool-data'
        >>> slugify("^^^REMOVE!!!Ill3gal$s*&^%$#@!~")
        'removeill3gals'
    """
    s = _WHITESPACE_RE.sub(" ", raw.strip())
    s = s.replace(" ", "-").lower()
    return _ILLEGAL_SLUG_CHARS_RE.sub("", s)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize(node: Node, id_prefix: str = DEFAULT_ID_PREFIX) -> Node:
    """
    Make a node tree-eligible (idempotent).

    - assigns a generated id when missing
    - lets an explicit `attributes["id"]` override the node id, otherwise mirrors the id into attributes
    - derives `attributes["slug"]` from string/numeric data, or slugifies a caller-supplied string slug
    - recomputes `is_leaf`
    """
    if not node.id:
        node.id = generate_id(id_prefix)

    if node.attributes is None:
        node.attributes = {}
    attrs = node.attributes

    attr_id = attrs.get("id")
    if attr_id is not None and attr_id != node.id:
        node.id = attr_id
    else:
        attrs["id"] = node.id

    slug = attrs.get("slug")
    if slug is None:
        if isinstance(node.data, str):
            attrs["slug"] = slugify(node.data)
        elif _is_number(node.data):
            attrs["slug"] = node.data
    elif isinstance(slug, str):
        attrs["slug"] = slugify(slug)

    if node.children is None:
        node.children = []
    node.is_leaf = not node.children
    return node


def normalize_subtree(node: Node, id_prefix: str = DEFAULT_ID_PREFIX) -> Node:
    """Normalize a node and every descendant."""
    normalize(node, id_prefix)
    for child in node.children:
        normalize_subtree(child, id_prefix)
    return node


def clone_node(node: Node, id_prefix: str = DEFAULT_ID_PREFIX) -> Node:
    """
    Copy of `node` and its subtree, every copied node under a fresh id.

    Each node is copied shallowly: `data` and extra fields are shared with the template,
    `attributes` and `children` are not.
    """
    new_id = generate_id(id_prefix)
    return node.model_copy(
        update={
            "id": new_id,
            "attributes": {**node.attributes, "id": new_id},
            "children": [clone_node(child, id_prefix) for child in node.children],
        }
    )


def create_node(
    children: list[Any] | None = None,
    data: Any = None,
    extra_properties: dict[str, Any] | None = None,
    *,
    id_prefix: str = DEFAULT_ID_PREFIX,
) -> Node:
    """
    Construct a detached, normalized node.

    Args:
        children: Optional initial children (nodes, mappings or bare labels)
        data: Node payload (required)
        extra_properties: Extra fields merged onto the node before normalization;
            may pre-seed `attributes`, `id` or any custom field
        id_prefix: Prefix for the generated id

    Returns:
        The normalized node

    Raises:
        RequireFieldError: If `data` is missing
    """
    if data is None:
        raise RequireFieldError("Node requires data property.")

    fields: dict[str, Any] = {"children": children or [], "data": data}
    if extra_properties:
        fields.update(extra_properties)
    return normalize(Node.model_validate(fields), id_prefix)
