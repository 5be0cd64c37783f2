"""
CLI entrypoint for the taxonomy engine.

This script performs the following steps:
- loads .env (if present) and configs/taxonomy.yaml (if present)
- loads the tree definition YAML into a TaxonomyEngine
- runs one action: render markup, print a node path, resolve a slug path, or dump the tree as JSON
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from application import TaxonomyEngine
from infrastructure.config import load_app_config, load_tree_definition
from infrastructure.config.models import MIN_MAX_DEPTH
from infrastructure.constants import SETTINGS_FILE, TREE_FILE
from infrastructure.io import ensure_exists
from infrastructure.observability import configure_logging, set_log_context

logger = logging.getLogger(__name__)


def _depth_bound(value: str) -> int:
    depth = int(value)
    if depth < MIN_MAX_DEPTH:
        raise argparse.ArgumentTypeError(f"must be >= {MIN_MAX_DEPTH}, got {depth}")
    return depth


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render and query a taxonomy tree")
    p.add_argument(
        "--config",
        type=str,
        default=str(SETTINGS_FILE),
        help="Path to settings YAML (default: configs/taxonomy.yaml; skipped if missing)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env; skipped if missing)",
    )
    p.add_argument(
        "--tree",
        type=str,
        default=None,
        help="Path to tree definition YAML (default: tree_file from settings, else configs/tree.yaml)",
    )
    action = p.add_mutually_exclusive_group()
    action.add_argument("--render", action="store_true", help="Print nested list markup (default action)")
    action.add_argument("--path", metavar="ID", help="Print the ancestor path of a node id")
    action.add_argument("--resolve", metavar="PATH", help="Print the node id for a slug path")
    action.add_argument("--dump", action="store_true", help="Print the normalized tree as JSON")
    p.add_argument(
        "--max-depth",
        type=_depth_bound,
        default=None,
        help=f"Depth bound for --render (>= {MIN_MAX_DEPTH})",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument("--log-file", type=str, default=None, help="Optional rotating log file")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    configure_logging(
        log_file=Path(args.log_file) if args.log_file else None,
        console_level=getattr(logging, args.console_level),
    )

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    cfg = load_app_config(config_path if config_path.exists() else None)
    set_log_context(taxonomy=cfg.name)

    tree_path = Path(args.tree) if args.tree else (cfg.tree_file or TREE_FILE)
    ensure_exists(tree_path, "tree definition")

    roots = load_tree_definition(tree_path, id_prefix=cfg.engine.id_prefix)
    engine = TaxonomyEngine.from_config(cfg, roots)

    if args.path is not None:
        if engine.find(args.path) is None:
            logger.error("Node not found: %s", args.path)
            return 1
        print(engine.path(args.path))
    elif args.resolve is not None:
        node_id = engine.find_by_path(args.resolve)
        if node_id is None:
            logger.error("No node at path: %s", args.resolve)
            return 1
        print(node_id)
    elif args.dump:
        print(json.dumps(engine.get_tree().model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        max_depth = args.max_depth if args.max_depth is not None else cfg.engine.max_depth
        print(engine.render(max_depth=max_depth))

    return 0


if __name__ == "__main__":
    sys.exit(main())
