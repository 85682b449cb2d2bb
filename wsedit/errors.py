"""Errors raised while applying workspace edits.

Filesystem failures are not wrapped: the ``OSError`` raised by the filesystem
layer reaches the caller unchanged.
"""

from __future__ import annotations


class WorkspaceEditError(Exception):
    """Base class for malformed or unappliable workspace edits."""


class MissingTarget(WorkspaceEditError):
    """A create or delete file operation carried no location."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind.capitalize()}File operation is missing its uri")
        self.kind = kind


class MissingRenameEndpoints(WorkspaceEditError):
    """A rename file operation lacked its source or target location."""

    def __init__(self, old_uri: str | None, new_uri: str | None) -> None:
        missing = [name for name, value in (("oldUri", old_uri), ("newUri", new_uri)) if not value]
        super().__init__(f"RenameFile operation is missing {' and '.join(missing)}")
        self.old_uri = old_uri
        self.new_uri = new_uri


class OverlappingEdits(WorkspaceEditError):
    """Two text edits of one document cover intersecting ranges."""

    def __init__(self, uri: str, first: str, second: str) -> None:
        super().__init__(f"Overlapping edits in {uri}: {first} and {second}")
        self.uri = uri


__all__ = ["MissingRenameEndpoints", "MissingTarget", "OverlappingEdits", "WorkspaceEditError"]
