import logging

from repo_fetcher import RepoFetcher
from tree_builder import build_tree

from tree_api.schemas import TreeResponse

logger = logging.getLogger(__name__)


def analyze(checkout: RepoFetcher, target_path: str, search: str | None = None) -> TreeResponse:
    """Build the (optionally filtered) tree of *target_path* inside the checkout.

    Raises:
        PathNotFoundError: If *target_path* does not exist in the checkout.
        TraversalError:    If the walk fails part way.
    """
    nodes = build_tree(checkout.path, target_path, search=search or None)
    logger.info("Analyzed '%s' (search=%r)", target_path, search)
    return TreeResponse(
        repo_info=checkout.repo_info(),
        path=target_path,
        file_structure=nodes,
    )
