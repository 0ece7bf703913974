import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from tree_builder import PathNotFoundError

from tree_api.config import settings
from tree_api.dependencies import Checkout
from tree_api.schemas import ErrorResponse, TreeResponse, not_found, server_error
from tree_api.services import treeService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["tree"],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


async def _analyze(checkout: Checkout, target_path: str, search: str | None) -> TreeResponse:
    try:
        return await run_in_threadpool(treeService.analyze, checkout, target_path, search)
    except PathNotFoundError as exc:
        raise not_found(target_path) from exc
    except Exception as exc:
        logger.exception("An error occurred during the API request: %s", exc)
        raise server_error() from exc


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("/modules", response_model=TreeResponse, response_model_exclude_none=True)
async def get_modules(checkout: Checkout, search: str | None = None) -> TreeResponse:
    """Tree of the repository's modules directory."""
    return await _analyze(checkout, settings.modules_path, search)


@router.get("/repository", response_model=TreeResponse, response_model_exclude_none=True)
async def get_repository(checkout: Checkout, search: str | None = None) -> TreeResponse:
    """Tree of the repository's package directory."""
    return await _analyze(checkout, settings.repository_path, search)


@router.get("/tree", response_model=TreeResponse, response_model_exclude_none=True)
async def get_tree(checkout: Checkout, path: str = "", search: str | None = None) -> TreeResponse:
    """Tree of an arbitrary sub-path ("" for the whole repository)."""
    return await _analyze(checkout, path.strip("/"), search)
