"""
Taxonomy engine: owns one tree and exposes the structural operations on it.

Every engine instance holds its own tree; there is no shared module-level
state. The engine is not thread-safe; callers sharing an instance across
threads must serialize access themselves (notably around `move`, which is a
remove followed by an add).
"""

import logging
from collections.abc import Mapping
from typing import Any

from application.rendering import render as render_markup
from domain.taxonomy import lookup
from domain.taxonomy.errors import RequireFieldError
from domain.taxonomy.loader import parse_tree_definition
from domain.taxonomy.node import Node, ParentChild, Tree
from domain.taxonomy.normalizer import DEFAULT_ID_PREFIX, clone_node, create_node, normalize, normalize_subtree
from domain.taxonomy.paths import build_path
from domain.taxonomy.walker import walk as walk_tree
from infrastructure.config.models import AppConfig, RenderConfig

logger = logging.getLogger(__name__)


class TaxonomyEngine:
    """
    In-memory ordered tree of labeled nodes.

    Not-found conditions are reported as None/False, never raised.
    The only raised error is RequireFieldError for nodes without data.
    """

    def __init__(
        self,
        tree: Tree | None = None,
        *,
        id_prefix: str = DEFAULT_ID_PREFIX,
        render_config: RenderConfig | None = None,
    ) -> None:
        self.id_prefix = id_prefix
        self.render_config = render_config or RenderConfig()
        self._tree = Tree()
        if tree is not None:
            self.set_tree(tree)

    @classmethod
    def from_config(cls, cfg: AppConfig, roots: list[Node] | None = None) -> "TaxonomyEngine":
        engine = cls(id_prefix=cfg.engine.id_prefix, render_config=cfg.render)
        if roots:
            engine.set_tree(Tree(roots=roots))
        return engine

    # ---- Tree handle ----

    def get_tree(self) -> Tree:
        return self._tree

    def set_tree(self, tree: Tree | Mapping[str, Any] | list[Any]) -> Tree:
        """Replace the whole tree. Accepts a Tree, a mapping with `roots`/`tree`, or a list of node definitions."""
        if isinstance(tree, Tree):
            for root in tree.roots:
                normalize_subtree(root, self.id_prefix)
            self._tree = tree
        else:
            self._tree = Tree(roots=parse_tree_definition(tree, id_prefix=self.id_prefix))
        logger.debug("Tree replaced (%d roots)", len(self._tree.roots))
        return self._tree

    def get_roots(self) -> list[Node]:
        return self._tree.roots

    def clear(self) -> Tree:
        self._tree = Tree()
        return self._tree

    # ---- Node construction ----

    def create_node(
        self,
        children: list[Any] | None = None,
        data: Any = None,
        extra_properties: dict[str, Any] | None = None,
    ) -> Node:
        """Create a detached node. Raises RequireFieldError when `data` is missing."""
        return create_node(children, data, extra_properties, id_prefix=self.id_prefix)

    # ---- Mutation ----

    def add_node(
        self,
        child: Node | Mapping[str, Any],
        parent: Node | None = None,
        position: int | None = None,
    ) -> Node:
        """
        Attach `child` under `parent` (or as a root when parent is None).

        If a node with `child.id` is already in the tree, a shallow copy with a fresh id is
        attached instead, so the same template node can appear at several places.

        Args:
            child: Node or plain mapping with at least `data`
            parent: Parent node; None appends to the roots
            position: Index in the parent's children; None appends. An index at or past the
                end of the children list is ignored and the node is not attached.

        Returns:
            The node actually attached (the original, its clone, or the node built from a mapping)

        Raises:
            RequireFieldError: If the node has no data
        """
        node = child if isinstance(child, Node) else Node.model_validate(dict(child))

        # attributes["id"] wins in normalize, so guard on that identity first
        original_id = node.attributes.get("id") or node.id
        if original_id and self.find(original_id) is not None:
            node = clone_node(node, self.id_prefix)
            logger.debug("Node %s already in tree; attaching clone %s", original_id, node.id)

        node = normalize(node, self.id_prefix)
        if not node.has_data():
            raise RequireFieldError("add_node requires child node with data property.")
        for descendant in node.children:
            normalize_subtree(descendant, self.id_prefix)

        if parent is None:
            self._tree.roots.append(node)
            return node

        if parent.children is None:
            parent.children = []
        if position is None:
            parent.children.append(node)
        elif position < len(parent.children):
            parent.children.insert(position, node)
        else:
            logger.warning(
                "Position %d out of range for parent %s (%d children); node %s not attached",
                position,
                parent.id,
                len(parent.children),
                node.id,
            )
        parent.is_leaf = not parent.children
        return node

    def insert(self, node: Node | Mapping[str, Any], parent_id: str, position: int | None = None) -> Node | None:
        """Attach `node` under the node with `parent_id`. Returns None if the parent is not in the tree."""
        parent = self.find(parent_id)
        if parent is None:
            logger.warning("insert: parent %s not found", parent_id)
            return None
        return self.add_node(node, parent, position)

    def remove(self, child_id: str) -> bool:
        """Unlink the node with `child_id` (and its subtree). Returns True iff something was removed."""
        removed = False
        pc = self.find_parent_child(child_id)

        if pc is not None:
            kept = [c for c in pc.parent.children if c.id != child_id]
            removed = len(kept) != len(pc.parent.children)
            pc.parent.children = kept
            pc.parent.is_leaf = not kept
        else:
            # Might be a root node
            kept = [r for r in self._tree.roots if r.id != child_id]
            removed = len(kept) != len(self._tree.roots)
            self._tree.roots = kept

        if removed:
            logger.debug("Removed node %s", child_id)
        return removed

    def move(self, node: Node, parent_id: str | None, position: int | None = None) -> Node | None:
        """
        Re-attach `node` under `parent_id` (None moves it to the roots).

        NOT atomic: the node is removed first. If `parent_id` cannot be resolved the node
        stays detached and None is returned; callers needing atomicity should check the
        target exists beforehand.
        """
        self.remove(node.id)
        if parent_id is None:
            return self.add_node(node, None, position)

        parent = self.find(parent_id)
        if parent is None:
            logger.warning("move: parent %s not found; node %s left detached", parent_id, node.id)
            return None
        return self.add_node(node, parent, position)

    def update(self, node_id: str, new_data: Any) -> Node | None:
        """Replace the `data` of the node in place. Returns the node, or None if not found."""
        node = self.find(node_id)
        if node is not None:
            node.data = new_data
        return node

    def update_node(self, node_id: str, replacement: Any) -> Any | None:
        """
        Return `replacement` if `node_id` is in the tree, else None.

        The stored node is left as it is; use `update` to change a node's data.
        """
        if self.find(node_id) is None:
            return None
        logger.debug("update_node(%s): stored node left unchanged", node_id)
        return replacement

    # ---- Lookup ----

    def find(self, node_id: str) -> Node | None:
        return lookup.find(self._tree.roots, node_id)

    def find_parent_child(self, child_id: str) -> ParentChild | None:
        return lookup.find_parent_child(self._tree.roots, child_id)

    def find_by_path(self, path: str) -> str | None:
        return lookup.find_by_path(self._tree.roots, path)

    def path(self, node_id: str) -> str:
        """'/'-delimited labels of the node's ancestors, e.g. '/foo/bar/'."""
        return build_path(self._tree.roots, node_id)

    # ---- Traversal / output ----

    def walk(self, hooks: Any = None, max_depth: int | None = None) -> None:
        walk_tree(self._tree.roots, hooks, max_depth)

    def render(self, options: RenderConfig | Mapping[str, Any] | None = None, max_depth: int | None = None) -> str:
        return render_markup(self._tree.roots, options, max_depth=max_depth, base=self.render_config)
