"""Filesystem collaborators used by the edit applier."""

from __future__ import annotations

import asyncio
import errno
import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path

import aiofiles
import aiofiles.os

from ..logging import get_logger

LOGGER = get_logger(__name__)


class FileSystem(ABC):
    """Interface for awaited file primitives.

    Every method may raise ``OSError``; callers let it propagate.
    """

    @abstractmethod
    async def read_text(self, path: Path) -> str:
        """Return the full text content of path."""

    @abstractmethod
    async def write_text(self, path: Path, content: str) -> None:
        """Replace the content of path in a single atomic step."""

    @abstractmethod
    async def create(self, path: Path, *, overwrite: bool) -> None:
        """Create an empty file, truncating an existing one only when overwrite is set."""

    @abstractmethod
    async def delete(self, path: Path, *, recursive: bool = False) -> None:
        """Remove a file, or a directory tree when recursive is set."""

    @abstractmethod
    async def rename(self, old_path: Path, new_path: Path, *, overwrite: bool) -> None:
        """Move old_path to new_path."""

    @abstractmethod
    async def exists(self, path: Path) -> bool:
        """Return whether path exists."""


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local disk through aiofiles."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    async def read_text(self, path: Path) -> str:
        # newline="" keeps \r\n intact so the content round-trips byte for byte
        async with aiofiles.open(path, "r", encoding=self.encoding, newline="") as handle:
            return await handle.read()

    async def write_text(self, path: Path, content: str) -> None:
        # edit the file a symlink points to, keeping the link itself
        target = Path(await asyncio.to_thread(os.path.realpath, path))
        tmp = target.with_name(f".{target.name}.wsedit_tmp_{os.getpid()}")
        try:
            async with aiofiles.open(tmp, "w", encoding=self.encoding, newline="") as handle:
                await handle.write(content)
            if await aiofiles.os.path.exists(target):
                await asyncio.to_thread(shutil.copymode, target, tmp)
            await aiofiles.os.replace(tmp, target)
        except OSError:
            if await aiofiles.os.path.exists(tmp):
                await aiofiles.os.remove(tmp)
            raise
        LOGGER.debug("Wrote %d characters to %s", len(content), path)

    async def create(self, path: Path, *, overwrite: bool) -> None:
        await aiofiles.os.makedirs(path.parent, exist_ok=True)
        mode = "w" if overwrite else "x"
        async with aiofiles.open(path, mode, encoding=self.encoding):
            pass

    async def delete(self, path: Path, *, recursive: bool = False) -> None:
        if await aiofiles.os.path.isdir(path):
            if recursive:
                await asyncio.to_thread(shutil.rmtree, path)
            else:
                await aiofiles.os.rmdir(path)
            return
        await aiofiles.os.remove(path)

    async def rename(self, old_path: Path, new_path: Path, *, overwrite: bool) -> None:
        if not overwrite and await aiofiles.os.path.exists(new_path):
            raise FileExistsError(errno.EEXIST, "Rename target already exists", str(new_path))
        await aiofiles.os.makedirs(new_path.parent, exist_ok=True)
        await aiofiles.os.replace(old_path, new_path)

    async def exists(self, path: Path) -> bool:
        return await aiofiles.os.path.exists(path)


__all__ = ["FileSystem", "LocalFileSystem"]
