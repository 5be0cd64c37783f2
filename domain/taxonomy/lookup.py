"""Tree lookups: by id, parent/child pair, and slug path."""

from collections.abc import Iterator, Sequence

from domain.taxonomy.node import Node, ParentChild
from domain.taxonomy.paths import split_path


def iter_nodes(roots: Sequence[Node]) -> Iterator[Node]:
    """Pre-order traversal over every node in the tree."""
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def find(roots: Sequence[Node], node_id: str) -> Node | None:
    """First node (depth-first) whose id matches, or None."""
    for node in iter_nodes(roots):
        if node.id == node_id:
            return node
    return None


def _find_parent_child(parent: Node, child_id: str) -> ParentChild | None:
    for position, child in enumerate(parent.children):
        if child.id == child_id:
            return ParentChild(parent=parent, child=child, position=position)
        match = _find_parent_child(child, child_id)
        if match is not None:
            return match
    return None


def find_parent_child(roots: Sequence[Node], child_id: str) -> ParentChild | None:
    """
    Locate the parent of `child_id` along with the child and its index.

    Root-level nodes have no parent and are never returned here.
    """
    for root in roots:
        match = _find_parent_child(root, child_id)
        if match is not None:
            return match
    return None


def _snapshot(node: Node) -> Node:
    """Copy of the fields a path scan reads (id, attributes, children); payloads are left out."""
    return Node.model_construct(
        id=node.id,
        attributes=dict(node.attributes),
        children=[_snapshot(child) for child in node.children],
        is_leaf=node.is_leaf,
    )


def _slug_matches(node: Node, segment: str) -> bool:
    return node.slug is not None and str(node.slug) == segment


def find_by_path(roots: Sequence[Node], path: str) -> str | None:
    """
    Resolve a slug path such as '/wang/chung/have/fun' to a node id.

    Each root is scanned on its own structural snapshot. Returns None when no root matches the full path.
    """
    segments = split_path(path)
    if not segments:
        return None

    for root in roots:
        snapshot = _snapshot(root)
        if not _slug_matches(snapshot, segments[0]):
            continue
        if len(segments) == 1:
            return snapshot.id

        current = snapshot
        for segment in segments[1:]:
            current = next((c for c in current.children if _slug_matches(c, segment)), None)
            if current is None:
                break
        if current is not None:
            return current.id
    return None
