from abc import ABC, abstractmethod
from typing import Any


class BaseFetcher(ABC):
    """Abstract base class for all repository fetchers.

    A fetcher materializes a disposable local copy of a remote repository
    and removes it again.  Used as a context manager the copy is fetched on
    entry and cleaned up on every exit path, including errors raised by
    :meth:`fetch` itself.
    """

    def __init__(self, url: str, name: str | None = None) -> None:
        self._url = url
        self._name = name
        self._path: str | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_fetched(self) -> bool:
        """Return True while a local copy exists."""
        return self._path is not None

    @property
    def path(self) -> str:
        """Local directory holding the fetched repository.

        Raises:
            RuntimeError: If called before :meth:`fetch`.
        """
        if self._path is None:
            raise RuntimeError("Not fetched. Call fetch() first.")
        return self._path

    @abstractmethod
    def fetch(self) -> str:
        """Acquire a local copy and return its directory.

        Raises:
            FetchError: If the copy could not be acquired.
        """
        ...

    @abstractmethod
    def cleanup(self) -> None:
        """Remove the local copy.  Safe to call more than once."""
        ...

    def __enter__(self) -> "BaseFetcher":
        try:
            self.fetch()
        except BaseException:
            self.cleanup()
            raise
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.cleanup()
