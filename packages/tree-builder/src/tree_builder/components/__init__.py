from .languages import aggregate_languages, classify_language
from .node import Language, LanguageStats, Node, NodeType
from .scanner import scan_directory
from .search import filter_tree

__all__ = [
    "Language",
    "LanguageStats",
    "Node",
    "NodeType",
    "aggregate_languages",
    "classify_language",
    "filter_tree",
    "scan_directory",
]
