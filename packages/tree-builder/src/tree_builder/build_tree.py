"""
TreeBuilder - analyzes a directory and produces a typed tree with language stats.

Each file and directory is represented as a node:

{
  "name": <name of the file or directory>,
  "path": <relative path from the analysis root>,
  "type": "dir" | "file",
  "children": [<child nodes>],                       # dirs only
  "languageAnalysis": {                              # dirs only
      "totalFiles": <files anywhere below the dir>,
      "dominantLanguage": <upper-cased label, or "NONE">,
      "counts": {<label>: <count>},
      "percentages": {<label>: "<share>%"}
  }
}

Usage (CLI):
    build-tree <directory> [--path <sub/path>] [--search <term>] [--output <file.json>]

Usage (library):
    from tree_builder.build_tree import build_tree
    nodes = build_tree("/path/to/dir", "src", search="index")
"""

import argparse
import json
import logging
import os
import sys
from typing import Any

from tree_builder.components.node import Node
from tree_builder.components.scanner import scan_directory
from tree_builder.components.search import filter_tree
from tree_builder.errors import PathNotFoundError, TreeBuilderError

logger = logging.getLogger(__name__)


def normalize_sub_path(relative_path: str) -> str:
    """Collapse ``./``, ``//`` and inner ``..`` segments; the root becomes ""."""
    normalized = os.path.normpath(relative_path or ".")
    return "" if normalized == os.curdir else normalized


def build_tree(root: str, relative_path: str = "", search: str | None = None) -> list[Node]:
    """Build the tree under ``root/relative_path``, filtered by *search* when given.

    Raises:
        PathNotFoundError: If ``root/relative_path`` does not exist.
        TraversalError:    If any directory cannot be listed.
    """
    sub_path = normalize_sub_path(relative_path)
    target = os.path.join(root, sub_path)
    # Sub-paths may not point outside the root, through ".." or a symlink
    real_root = os.path.realpath(root)
    escapes = os.path.commonpath([real_root, os.path.realpath(target)]) != real_root
    if escapes or not os.path.exists(target):
        raise PathNotFoundError(relative_path)

    nodes = scan_directory(root, sub_path)
    logger.info("Built tree for %s (%d top-level entries)", target, len(nodes))

    if search:
        nodes = filter_tree(nodes, search)
        logger.info("Search %r kept %d top-level entries", search, len(nodes))
    return nodes


def tree_to_dicts(nodes: list[Node]) -> list[dict[str, Any]]:
    """Serialize *nodes* into plain JSON-ready records."""
    return [node.to_dict() for node in nodes]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Analyze a directory tree and report per-directory language stats."
    )
    parser.add_argument("directory", help="Root directory to analyze")
    parser.add_argument(
        "--path",
        "-p",
        default="",
        help="Sub-path under the root to analyze (default: the whole root)",
    )
    parser.add_argument("--search", "-s", help="Keep only entries whose name contains TERM")
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write JSON output to FILE instead of stdout",
    )
    args = parser.parse_args(argv)

    try:
        nodes = build_tree(args.directory, args.path, search=args.search)
    except PathNotFoundError as exc:
        print(f"error: '{exc.relative_path}' does not exist under {args.directory}", file=sys.stderr)
        return 2
    except TreeBuilderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    output = json.dumps(tree_to_dicts(nodes), indent=2)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Tree written to {args.output} ({len(nodes)} nodes)")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
