class BlogError(Exception):
    """Base class for content resolution failures."""

    def __init__(self, identifier: str, message: str = ""):
        self.identifier = identifier
        super().__init__(message or identifier)


class NotFound(BlogError):
    """Missing post or asset, or a name that escapes its root."""


class MalformedContent(BlogError):
    """A post file that cannot be parsed into a post."""


class UpstreamIO(BlogError):
    """A filesystem failure other than the file being absent."""
