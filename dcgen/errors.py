"""Error types raised by the dcgen engine."""

from __future__ import annotations


class DcgenError(RuntimeError):
    """Base class for engine errors surfaced to callers."""


class TemplateNotFound(DcgenError):
    """Raised when a caller names a base template absent from the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Template '{name}' not found")
        self.name = name


class NoTemplateMatch(DcgenError):
    """Raised when the catalog has no usable fallback template."""


class ConfigNotFound(DcgenError):
    """Raised when a patch is requested but no existing document is available."""


class MalformedDocument(DcgenError):
    """Raised when a persisted document cannot be parsed into a mapping."""


__all__ = [
    "ConfigNotFound",
    "DcgenError",
    "MalformedDocument",
    "NoTemplateMatch",
    "TemplateNotFound",
]
