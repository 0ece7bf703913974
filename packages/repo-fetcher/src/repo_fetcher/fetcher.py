from typing import Any

from repo_fetcher.components import BaseFetcher, GitFetcher
from repo_fetcher.models import RepoInfo, parse_repo_url


class RepoFetcher:
    """High-level interface for acquiring a disposable repository copy.

    Wraps any :class:`~repo_fetcher.components.BaseFetcher` implementation.
    The default backend is :class:`~repo_fetcher.components.GitFetcher`.

    Example  using as a context manager::

        fetcher = RepoFetcher("https://github.com/owner/repo.git")
        with fetcher:
            nodes = build_tree(fetcher.path, "src")
        # the clone is gone here, whatever happened inside the block

    Example  manual lifecycle::

        fetcher = RepoFetcher(url, depth=1)
        try:
            fetcher.fetch()
            ...
        finally:
            fetcher.cleanup()
    """

    def __init__(
        self,
        url: str,
        name: str | None = None,
        backend: type[BaseFetcher] = GitFetcher,
        **options: Any,
    ) -> None:
        """Initialise the fetcher.

        Args:
            url:       Remote repository URL.
            name:      Directory name for the checkout.  Defaults to the
                       repository name parsed from *url*.
            backend:   A :class:`BaseFetcher` subclass to do the work.
                       Defaults to :class:`GitFetcher`.
            **options: Extra keyword arguments for the backend
                       (e.g. ``depth``, ``timeout``, ``prefix``).
        """
        self._name = name or parse_repo_url(url)[1]
        self._fetcher: BaseFetcher = backend(url, self._name, **options)

    # ------------------------------------------------------------------
    # Lifecycle (delegates to the backend)
    # ------------------------------------------------------------------

    def fetch(self) -> str:
        """Acquire the local copy and return its directory."""
        return self._fetcher.fetch()

    def cleanup(self) -> None:
        """Remove the local copy."""
        self._fetcher.cleanup()

    @property
    def is_fetched(self) -> bool:
        return self._fetcher.is_fetched

    @property
    def path(self) -> str:
        return self._fetcher.path

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def repo_info(self) -> RepoInfo:
        """Owner / name of the repository, stamped with the current time."""
        return RepoInfo.from_url(self._fetcher.url, self._name)

    # ------------------------------------------------------------------
    # Context manager support
    # ------------------------------------------------------------------

    def __enter__(self) -> "RepoFetcher":
        self._fetcher.__enter__()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self._fetcher.__exit__(exc_type, exc_val, exc_tb)
