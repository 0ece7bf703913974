"""Tests for repo_fetcher package.

All tests mock ``subprocess.run`` so no network access or git binary is
required.
"""
import os
import subprocess
import tempfile
from unittest.mock import MagicMock, patch

import pytest

from repo_fetcher.components.base_fetcher import BaseFetcher
from repo_fetcher.components.git_fetcher import GitFetcher
from repo_fetcher.errors import FetchError
from repo_fetcher.fetcher import RepoFetcher
from repo_fetcher.models import RepoInfo, parse_repo_url

URL = "https://github.com/yigitkabak/aperium-repo.git"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _DirFetcher(BaseFetcher):
    """Minimal concrete subclass that "fetches" into a given directory."""

    def __init__(self, url: str, name: str | None = None, target: str = "", fail: bool = False) -> None:
        super().__init__(url, name)
        self._target = target
        self._fail = fail
        self.cleanups = 0

    def fetch(self) -> str:
        if self._fail:
            raise FetchError(self._url, "boom")
        self._path = self._target
        return self._path

    def cleanup(self) -> None:
        self.cleanups += 1
        self._path = None


def _fake_clone(cmd, **kwargs):
    """Stand-in for ``git clone`` that just creates the target directory."""
    os.makedirs(cmd[-1])
    return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")


# ---------------------------------------------------------------------------
# URL parsing / RepoInfo
# ---------------------------------------------------------------------------

class TestParseRepoUrl:
    @pytest.mark.parametrize(
        "url, expected",
        [
            (URL, ("yigitkabak", "aperium-repo")),
            ("https://github.com/owner/name", ("owner", "name")),
            ("https://github.com/owner/name/", ("owner", "name")),
            ("git@github.com:owner/name.git", ("owner", "name")),
        ],
    )
    def test_parse(self, url, expected):
        assert parse_repo_url(url) == expected

    def test_repo_info_aliases(self):
        info = RepoInfo.from_url(URL)
        data = info.model_dump(by_alias=True)
        assert data["owner"] == "yigitkabak"
        assert data["repoName"] == "aperium-repo"
        assert data["lastUpdated"].endswith("Z")


# ---------------------------------------------------------------------------
# BaseFetcher tests
# ---------------------------------------------------------------------------

class TestBaseFetcher:
    def test_cannot_instantiate_directly(self):
        with pytest.raises(TypeError):
            BaseFetcher(URL)  # type: ignore[abstract]

    def test_path_before_fetch_raises(self):
        fetcher = _DirFetcher(URL, target="/tmp/x")
        assert fetcher.is_fetched is False
        with pytest.raises(RuntimeError, match="Not fetched"):
            _ = fetcher.path

    def test_context_manager_fetches_and_cleans_up(self, tmp_path):
        fetcher = _DirFetcher(URL, target=str(tmp_path))
        with fetcher as ctx:
            assert ctx.path == str(tmp_path)
        assert fetcher.is_fetched is False
        assert fetcher.cleanups == 1

    def test_cleanup_runs_when_block_raises(self, tmp_path):
        fetcher = _DirFetcher(URL, target=str(tmp_path))
        with pytest.raises(ValueError):
            with fetcher:
                raise ValueError("inside")
        assert fetcher.cleanups == 1

    def test_cleanup_runs_when_fetch_fails(self):
        fetcher = _DirFetcher(URL, fail=True)
        with pytest.raises(FetchError):
            with fetcher:
                pass
        assert fetcher.cleanups == 1


# ---------------------------------------------------------------------------
# GitFetcher tests (mocked subprocess)
# ---------------------------------------------------------------------------

class TestGitFetcher:
    def test_clone_command(self, tmp_path):
        fetcher = GitFetcher(URL, depth=1, prefix="test_clone_")
        with patch("repo_fetcher.components.git_fetcher.tempfile.mkdtemp", return_value=str(tmp_path / "t")), \
                patch("repo_fetcher.components.git_fetcher.subprocess.run", side_effect=_fake_clone) as run:
            (tmp_path / "t").mkdir()
            path = fetcher.fetch()

        cmd = run.call_args.args[0]
        assert cmd == ["git", "clone", "--depth=1", URL, os.path.join(str(tmp_path / "t"), "aperium-repo")]
        assert run.call_args.kwargs["check"] is True
        assert path.endswith("aperium-repo")
        assert fetcher.is_fetched is True

    def test_fetch_is_idempotent(self):
        fetcher = GitFetcher(URL)
        with patch("repo_fetcher.components.git_fetcher.subprocess.run", side_effect=_fake_clone) as run:
            first = fetcher.fetch()
            second = fetcher.fetch()
        try:
            assert first == second
            run.assert_called_once()
        finally:
            fetcher.cleanup()

    def test_cleanup_removes_temp_root(self):
        fetcher = GitFetcher(URL)
        with patch("repo_fetcher.components.git_fetcher.subprocess.run", side_effect=_fake_clone):
            with fetcher:
                clone_path = fetcher.path
                assert os.path.isdir(clone_path)
        assert not os.path.exists(os.path.dirname(clone_path))
        assert fetcher.is_fetched is False

    def test_clone_failure_is_wrapped_and_cleaned(self):
        error = subprocess.CalledProcessError(128, ["git"], stderr="fatal: repository not found\n")
        fetcher = GitFetcher(URL)
        created: list[str] = []
        real_mkdtemp = tempfile.mkdtemp

        def _mkdtemp(**kwargs):
            created.append(real_mkdtemp(**kwargs))
            return created[-1]

        with patch("repo_fetcher.components.git_fetcher.tempfile.mkdtemp", side_effect=_mkdtemp), \
                patch("repo_fetcher.components.git_fetcher.subprocess.run", side_effect=error):
            with pytest.raises(FetchError, match="repository not found"):
                with fetcher:
                    pass

        assert not os.path.exists(created[0])

    def test_timeout_is_wrapped(self):
        fetcher = GitFetcher(URL, timeout=5)
        with patch(
            "repo_fetcher.components.git_fetcher.subprocess.run",
            side_effect=subprocess.TimeoutExpired(["git"], 5),
        ):
            with pytest.raises(FetchError, match="timed out"):
                fetcher.fetch()
        fetcher.cleanup()

    def test_missing_git_binary(self):
        fetcher = GitFetcher(URL)
        with patch("repo_fetcher.components.git_fetcher.subprocess.run", side_effect=FileNotFoundError("git")):
            with pytest.raises(FetchError, match="git executable not found"):
                fetcher.fetch()
        fetcher.cleanup()


# ---------------------------------------------------------------------------
# RepoFetcher tests
# ---------------------------------------------------------------------------

class TestRepoFetcher:
    def test_uses_git_backend_by_default(self):
        fetcher = RepoFetcher(URL)
        assert isinstance(fetcher._fetcher, GitFetcher)

    def test_accepts_custom_backend(self, tmp_path):
        fetcher = RepoFetcher(URL, backend=_DirFetcher, target=str(tmp_path))
        assert isinstance(fetcher._fetcher, _DirFetcher)

    def test_context_manager_delegates_to_backend(self, tmp_path):
        fetcher = RepoFetcher(URL, backend=_DirFetcher, target=str(tmp_path))
        with fetcher as ctx:
            assert ctx.is_fetched is True
            assert ctx.path == str(tmp_path)
        assert fetcher.is_fetched is False

    def test_repo_info_uses_name_override(self, tmp_path):
        fetcher = RepoFetcher(URL, name="checkout", backend=_DirFetcher, target=str(tmp_path))
        info = fetcher.repo_info()
        assert info.owner == "yigitkabak"
        assert info.repo_name == "checkout"

    def test_backend_receives_options(self):
        backend = MagicMock()
        RepoFetcher(URL, backend=backend, depth=3)
        backend.assert_called_once_with(URL, "aperium-repo", depth=3)
