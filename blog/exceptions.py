class PostError(Exception):
    """Base class for failures turning one content file into a Post."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


class PostReadError(PostError, OSError):
    """The file could not be read or decoded as UTF-8."""


class FormatError(PostError, ValueError):
    """Delimiters, frontmatter or date did not match the expected format."""
