from .base_fetcher import BaseFetcher
from .git_fetcher import GitFetcher

__all__ = ["BaseFetcher", "GitFetcher"]
