from __future__ import annotations


class PointStoreError(Exception):
    """Base class for every failure raised by the point store."""


class FileReadError(PointStoreError):
    """The document could not be read from disk (missing, unreadable)."""


class ParseError(PointStoreError):
    """The document is not a JSON array of well-formed image records."""


class ImageNotFound(PointStoreError):
    """No image record matches the requested path."""

    def __init__(self, path: str):
        super().__init__(f"no points recorded for image {path!r}")
        self.path = path


class WriteError(PointStoreError):
    """The document could not be written back to disk."""
