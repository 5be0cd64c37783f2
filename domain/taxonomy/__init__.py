"""
Taxonomy tree: node model, normalization, lookup, paths and traversal.

All functions in this module are pure (no file I/O) and operate on a
sequence of root nodes; tree ownership lives in application.engine.
"""

from domain.taxonomy.errors import RequireFieldError, TaxonomyError
from domain.taxonomy.loader import parse_tree_definition
from domain.taxonomy.lookup import find, find_by_path, find_parent_child, iter_nodes
from domain.taxonomy.node import Node, ParentChild, Tree
from domain.taxonomy.normalizer import (
    DEFAULT_ID_PREFIX,
    clone_node,
    create_node,
    generate_id,
    normalize,
    normalize_subtree,
    slugify,
)
from domain.taxonomy.paths import PATH_SEPARATOR, build_path, path_segments, split_path
from domain.taxonomy.walker import HOOK_NAMES, walk

__all__ = [
    # Models
    "Node",
    "Tree",
    "ParentChild",
    # Errors
    "TaxonomyError",
    "RequireFieldError",
    # Normalization
    "DEFAULT_ID_PREFIX",
    "create_node",
    "normalize",
    "normalize_subtree",
    "clone_node",
    "generate_id",
    "slugify",
    # Lookup
    "iter_nodes",
    "find",
    "find_parent_child",
    "find_by_path",
    # Paths
    "PATH_SEPARATOR",
    "build_path",
    "path_segments",
    "split_path",
    # Traversal
    "HOOK_NAMES",
    "walk",
    # Parsing
    "parse_tree_definition",
]
