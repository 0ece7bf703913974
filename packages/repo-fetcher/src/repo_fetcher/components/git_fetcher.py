import logging
import os
import shutil
import subprocess
import tempfile

from repo_fetcher.errors import FetchError
from repo_fetcher.models import parse_repo_url

from .base_fetcher import BaseFetcher

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "repo_tree_clone_"


class GitFetcher(BaseFetcher):
    """Shallow ``git clone`` into a fresh temporary directory.

    The clone lands in ``<tmp>/<prefix>XXXX/<name>`` and :meth:`cleanup`
    removes the whole temporary root.

    Example::

        fetcher = GitFetcher("https://github.com/owner/repo.git")
        with fetcher:
            print(os.listdir(fetcher.path))
    """

    def __init__(
        self,
        url: str,
        name: str | None = None,
        depth: int = 1,
        timeout: float = 300,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        super().__init__(url, name or parse_repo_url(url)[1])
        self._depth = depth
        self._timeout = timeout
        self._prefix = prefix
        self._temp_root: str | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def fetch(self) -> str:
        """Clone the repository and return the checkout directory."""
        if self._path is not None:
            return self._path

        self._temp_root = tempfile.mkdtemp(prefix=self._prefix)
        clone_path = os.path.join(self._temp_root, self._name)
        cmd = ["git", "clone", f"--depth={self._depth}", self._url, clone_path]

        logger.info("Cloning %s into %s", self._url, clone_path)
        try:
            subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError as exc:
            raise FetchError(self._url, "git executable not found") from exc
        except subprocess.TimeoutExpired as exc:
            logger.error("git clone timed out after %ss: %s", self._timeout, self._url)
            raise FetchError(self._url, f"timed out after {self._timeout}s") from exc
        except subprocess.CalledProcessError as exc:
            logger.error("git clone failed for %s: %s", self._url, (exc.stderr or "").strip())
            raise FetchError(self._url, (exc.stderr or "").strip() or f"exit status {exc.returncode}") from exc

        self._path = clone_path
        logger.info("Repository cloned to %s", clone_path)
        return clone_path

    def cleanup(self) -> None:
        """Delete the temporary root and everything under it."""
        if self._temp_root is not None and os.path.exists(self._temp_root):
            shutil.rmtree(self._temp_root, ignore_errors=True)
            logger.info("Removed temporary clone %s", self._temp_root)
        self._temp_root = None
        self._path = None
