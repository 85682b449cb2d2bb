"""Path helper utilities."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

_LOCAL_HOSTS = {"", "localhost"}


def uri_to_path(uri: str) -> Path:
    """Resolve a document location (``file://`` URI or bare path) to a path."""
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        return Path(uri)
    if parsed.netloc not in _LOCAL_HOSTS:
        # UNC share: //host/share/...
        return Path(url2pathname(f"//{parsed.netloc}{parsed.path}"))
    return Path(url2pathname(parsed.path))


def display_path(path: Path, base_dir: Path | None) -> str:
    """Return path relative to base_dir with forward slashes, or as-is when outside it."""
    if base_dir is None:
        return path.as_posix()
    try:
        return path.relative_to(base_dir).as_posix()
    except ValueError:
        return path.as_posix()


__all__ = ["display_path", "uri_to_path"]
