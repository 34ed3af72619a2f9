"""Error taxonomy raised while ingesting content files."""

from __future__ import annotations


class ContentError(ValueError):
    """Base class for content parse and validation failures."""

    def __init__(self, message: str, *, source_path: str | None = None) -> None:
        super().__init__(message)
        self.source_path = source_path

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        message = super().__str__()
        if self.source_path:
            return f"{self.source_path}: {message}"
        return message


class FrontMatterError(ContentError):
    """Raised when the front-matter block cannot be located or read."""


class MissingFrontMatter(FrontMatterError):
    """Raised when the source does not open with a front-matter fence."""


class MalformedFrontMatter(FrontMatterError):
    """Raised when the front-matter block is unterminated or unreadable."""


class MetadataError(ContentError):
    """Raised when front-matter metadata fails validation."""

    def __init__(self, message: str, key: str, *, source_path: str | None = None) -> None:
        super().__init__(message, source_path=source_path)
        self.key = key


class MissingRequiredField(MetadataError):
    """Raised when a required front-matter key is absent."""

    def __init__(self, key: str, *, source_path: str | None = None) -> None:
        super().__init__(f"Missing required field '{key}'.", key, source_path=source_path)


class InvalidFieldType(MetadataError):
    """Raised when a front-matter value has the wrong type."""

    def __init__(
        self,
        key: str,
        expected_type: str,
        *,
        detail: str | None = None,
        source_path: str | None = None,
    ) -> None:
        message = f"Field '{key}' must be a {expected_type}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message, key, source_path=source_path)
        self.expected_type = expected_type
