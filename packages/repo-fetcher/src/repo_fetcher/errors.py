class FetchError(Exception):
    """Raised when a local copy of the repository could not be acquired."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")
