"""Path reconstruction: node id -> '/ancestor/labels/'."""

from collections.abc import Sequence

from domain.taxonomy.node import Node

PATH_SEPARATOR = "/"


def split_path(path: str) -> list[str]:
    """
    Split a '/a/b/c' path into its segments.

    The leading empty segment is dropped, as is the empty segment produced by a trailing slash.

    Examples:
        >>> split_path("/wang/chung/have/fun/")
        ['wang', 'chung', 'have', 'fun']
    """
    segments = path.split(PATH_SEPARATOR)
    if segments:
        segments.pop(0)
    if path.endswith(PATH_SEPARATOR) and segments:
        segments.pop()
    return segments


def _ancestor_labels(node: Node, node_id: str) -> list[str] | None:
    """Labels of the nodes strictly above `node_id` within this subtree, or None if absent."""
    if node.id == node_id:
        return []
    for child in node.children:
        below = _ancestor_labels(child, node_id)
        if below is not None:
            return [str(node.data), *below]
    return None


def path_segments(roots: Sequence[Node], node_id: str) -> list[str] | None:
    """Ancestor data labels of the node, root first; None when the id is not in the tree."""
    for root in roots:
        labels = _ancestor_labels(root, node_id)
        if labels is not None:
            return labels
    return None


def build_path(roots: Sequence[Node], node_id: str) -> str:
    """
    Path of ancestor labels for a node, always starting and ending with '/'.

    The node's own label is not part of the path; a root node (or an unknown id) yields '/'.
    """
    labels = path_segments(roots, node_id) or []
    return PATH_SEPARATOR + "".join(f"{label}{PATH_SEPARATOR}" for label in labels)
