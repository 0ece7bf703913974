from pydantic import BaseModel, ConfigDict, Field

from repo_fetcher import RepoInfo
from tree_builder import Node


class TreeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    repo_info: RepoInfo = Field(alias="repoInfo")
    path: str
    file_structure: list[Node] = Field(alias="fileStructure")


class ErrorResponse(BaseModel):
    error: str
    message: str


class ApiError(Exception):
    """An error with a ready-made ``{"error", "message"}`` body."""

    def __init__(self, status_code: int, error: str, message: str) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        super().__init__(message)


def not_found(target_path: str) -> ApiError:
    return ApiError(
        404,
        "Path not found.",
        f"The file or folder '{target_path}' does not exist in the repository.",
    )


def server_error() -> ApiError:
    return ApiError(500, "Server Error", "An unexpected error occurred during the operation.")
