from tree_builder.build_tree import build_tree, tree_to_dicts
from tree_builder.components import (
    Language,
    LanguageStats,
    Node,
    NodeType,
    aggregate_languages,
    filter_tree,
    scan_directory,
)
from tree_builder.errors import PathNotFoundError, TraversalError, TreeBuilderError

__all__ = [
    "Language",
    "LanguageStats",
    "Node",
    "NodeType",
    "PathNotFoundError",
    "TraversalError",
    "TreeBuilderError",
    "aggregate_languages",
    "build_tree",
    "filter_tree",
    "scan_directory",
    "tree_to_dicts",
]
