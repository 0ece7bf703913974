from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeType(StrEnum):
    FILE = "file"
    DIRECTORY = "dir"


class Language(StrEnum):
    JS = "js"
    TS = "ts"
    VUE = "vue"
    JSON = "json"
    HTML = "html"
    CSS = "css"
    JAVA = "java"
    CS = "cs"
    C = "c"
    CPP = "cpp"
    OTHER = "other"


class LanguageStats(BaseModel):
    """Extension-based language breakdown of a directory subtree."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_files: int = Field(default=0, ge=0, alias="totalFiles")
    dominant_language: str = Field(default="NONE", alias="dominantLanguage")
    counts: dict[Language, int] = Field(default_factory=dict)
    percentages: dict[Language, str] = Field(default_factory=dict)


class Node(BaseModel):
    """One file or directory of an analyzed tree.

    ``children`` and ``language_analysis`` are only set on directories.
    Nodes are frozen; the search filter derives new nodes with
    :meth:`pydantic.BaseModel.model_copy` instead of editing them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    path: str
    node_type: NodeType = Field(alias="type")
    children: list[Node] | None = None
    language_analysis: LanguageStats | None = Field(default=None, alias="languageAnalysis")

    @property
    def is_dir(self) -> bool:
        return self.node_type is NodeType.DIRECTORY

    def iter_files(self) -> Iterator[Node]:
        """Yield every file node in this subtree (the node itself if it is a file)."""
        if not self.is_dir:
            yield self
            return
        for child in self.children or []:
            yield from child.iter_files()

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
