"""Shared fixtures for wsedit tests."""

from __future__ import annotations

import errno
from pathlib import Path

import pytest

from wsedit.lsp.fs import FileSystem
from wsedit.lsp.messages import Position, Range, TextEdit


class MemoryFileSystem(FileSystem):
    """In-memory FileSystem recording every call it receives."""

    def __init__(self, files: dict[Path, str] | None = None) -> None:
        self.files: dict[Path, str] = dict(files or {})
        self.calls: list[tuple[str, tuple[Path, ...]]] = []

    async def read_text(self, path: Path) -> str:
        self.calls.append(("read_text", (path,)))
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file", str(path))
        return self.files[path]

    async def write_text(self, path: Path, content: str) -> None:
        self.calls.append(("write_text", (path,)))
        self.files[path] = content

    async def create(self, path: Path, *, overwrite: bool) -> None:
        self.calls.append(("create", (path,)))
        if path in self.files and not overwrite:
            raise FileExistsError(errno.EEXIST, "File exists", str(path))
        self.files[path] = ""

    async def delete(self, path: Path, *, recursive: bool = False) -> None:
        self.calls.append(("delete", (path,)))
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file", str(path))
        del self.files[path]

    async def rename(self, old_path: Path, new_path: Path, *, overwrite: bool) -> None:
        self.calls.append(("rename", (old_path, new_path)))
        if new_path in self.files and not overwrite:
            raise FileExistsError(errno.EEXIST, "File exists", str(new_path))
        self.files[new_path] = self.files.pop(old_path)

    async def exists(self, path: Path) -> bool:
        self.calls.append(("exists", (path,)))
        return path in self.files


def make_edit(start: tuple[int, int], end: tuple[int, int], text: str) -> TextEdit:
    return TextEdit(
        range=Range(
            start=Position(line=start[0], character=start[1]),
            end=Position(line=end[0], character=end[1]),
        ),
        new_text=text,
    )


@pytest.fixture()
def edit_factory():
    return make_edit


@pytest.fixture()
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()
