from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def parse_repo_url(url: str) -> tuple[str, str]:
    """Split a git URL into ``(owner, name)``.

    Handles ``https://host/owner/name(.git)`` and ``git@host:owner/name.git``.
    """
    trimmed = url.rstrip("/")
    if trimmed.endswith(".git"):
        trimmed = trimmed[: -len(".git")]
    parts = trimmed.replace(":", "/").split("/")
    name = parts[-1]
    owner = parts[-2] if len(parts) > 1 else ""
    return owner, name


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class RepoInfo(BaseModel):
    """Metadata reported alongside an analyzed tree."""

    model_config = ConfigDict(populate_by_name=True)

    owner: str
    repo_name: str = Field(alias="repoName")
    last_updated: str = Field(default_factory=_utc_now, alias="lastUpdated")

    @classmethod
    def from_url(cls, url: str, name: str | None = None) -> "RepoInfo":
        owner, parsed_name = parse_repo_url(url)
        return cls(owner=owner, repo_name=name or parsed_name)
