from repo_fetcher.components import BaseFetcher, GitFetcher
from repo_fetcher.errors import FetchError
from repo_fetcher.fetcher import RepoFetcher
from repo_fetcher.models import RepoInfo, parse_repo_url

__all__ = [
    "BaseFetcher",
    "FetchError",
    "GitFetcher",
    "RepoFetcher",
    "RepoInfo",
    "parse_repo_url",
]
