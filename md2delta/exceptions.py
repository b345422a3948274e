from typing import Any, Literal

MappingKind = Literal["inline", "block", "embed"]

_KIND_TARGETS: dict[str, str] = {"inline": "attribute", "block": "attribute", "embed": "embeddable"}


class ConversionError(Exception):
    """Base exception for all markdown-to-delta conversion errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        return {"detail": str(self)}


class UnmappedConversionError(ConversionError):
    """Raised when an element is converted although no mapping exists for its tag.

    Always a bug in the caller or in a mapping table, never recovered from.
    """

    def __init__(self, tag: str, kind: MappingKind, element: Any = None, *, message: str | None = None):
        described = element if element is not None else f"<{tag}>"
        super().__init__(message or f"Element {described} cannot be converted to {kind} {_KIND_TARGETS[kind]}")
        self.tag = tag
        self.kind = kind

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "tag": self.tag, "kind": self.kind}


class MarkdownTooLargeError(ConversionError):
    """Raised when submitted markdown exceeds the configured size limit - maps to HTTP 413."""

    status_code = 413

    def __init__(self, size: int, limit: int, *, message: str | None = None):
        super().__init__(message or f"Markdown too large: {size} characters, limit is {limit}")
        self.size = size
        self.limit = limit

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "size": self.size, "limit": self.limit}


class TreeTooLargeError(ConversionError):
    """Raised when a submitted markup tree has more nodes than allowed - maps to HTTP 413."""

    status_code = 413

    def __init__(self, size: int, limit: int, *, message: str | None = None):
        super().__init__(message or f"Markup tree too large: {size} nodes, limit is {limit}")
        self.size = size
        self.limit = limit

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "size": self.size, "limit": self.limit}
