class TreeBuilderError(Exception):
    """Base class for failures raised while building a tree."""


class PathNotFoundError(TreeBuilderError):
    """The requested sub-path does not exist under the analysis root."""

    def __init__(self, relative_path: str) -> None:
        self.relative_path = relative_path
        super().__init__(f"Path not found: {relative_path!r}")


class TraversalError(TreeBuilderError):
    """A directory could not be listed during the walk."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Failed to list directory: {path}")
