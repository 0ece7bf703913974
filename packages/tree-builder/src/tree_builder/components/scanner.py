import logging
import os

from tree_builder.errors import TraversalError

from .languages import aggregate_languages
from .node import Node, NodeType

logger = logging.getLogger(__name__)

VCS_DIR = ".git"


def _to_posix(path: str) -> str:
    return path.replace(os.sep, "/")


def scan_directory(base_path: str, relative_path: str = "") -> list[Node]:
    """
    Recursively build the nodes for every entry of ``base_path/relative_path``.

    Entries are listed in sorted name order and the ``.git`` directory is
    skipped. Symlinks are reported as file nodes without being followed.
    Each directory is returned with its children and its language stats
    already attached.

    Args:
        base_path:     Root directory of the analysis. Must exist.
        relative_path: Sub-path under *base_path* to list ("" for the root).

    Returns:
        A list of nodes, or an empty list when the target is missing or is
        not a directory.

    Raises:
        TraversalError: If a directory cannot be listed.
    """
    full_path = os.path.join(base_path, relative_path)
    if not os.path.isdir(full_path):
        return []

    try:
        with os.scandir(full_path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise TraversalError(full_path) from exc

    nodes: list[Node] = []
    for entry in entries:
        if entry.name == VCS_DIR:
            continue

        entry_rel = os.path.join(relative_path, entry.name)
        # Symlinks are reported as files and never followed
        if entry.is_dir(follow_symlinks=False):
            children = scan_directory(base_path, entry_rel)
            node = Node(
                name=entry.name,
                path=_to_posix(entry_rel),
                node_type=NodeType.DIRECTORY,
                children=children,
                language_analysis=aggregate_languages(children),
            )
        else:
            node = Node(name=entry.name, path=_to_posix(entry_rel), node_type=NodeType.FILE)
        nodes.append(node)

    logger.debug("Scanned %s (%d entries)", full_path, len(nodes))
    return nodes
