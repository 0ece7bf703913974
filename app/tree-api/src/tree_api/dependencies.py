from collections.abc import Generator
from typing import Annotated

from fastapi import Depends

from repo_fetcher import RepoFetcher

from tree_api.config import settings


def get_checkout() -> Generator[RepoFetcher, None, None]:
    """FastAPI dependency that clones the repository and removes it after the request."""
    fetcher = RepoFetcher(
        settings.repo_url,
        name=settings.repo_name,
        depth=settings.clone_depth,
        timeout=settings.clone_timeout,
        prefix=settings.clone_prefix,
    )
    with fetcher:
        yield fetcher


Checkout = Annotated[RepoFetcher, Depends(get_checkout)]
