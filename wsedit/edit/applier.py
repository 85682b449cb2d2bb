"""Apply workspace edits to files on disk, or preview them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import MissingRenameEndpoints, MissingTarget
from ..logging import action_prefix, get_logger
from ..lsp.fs import FileSystem, LocalFileSystem
from ..lsp.messages import CreateFile, DeleteFile, FileOperation, RenameFile, TextEdit, WorkspaceEdit
from ..paths import display_path, uri_to_path
from .plan import DocumentEditBatch, WorkItem, plan_workspace_edit
from .text import check_overlaps, describe_edit, fold_edits, sort_for_application

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ApplyResult:
    file: str
    changes: int


class EditApplier:
    """Execute work items one at a time against a FileSystem.

    Work items run strictly in plan order; the first failure aborts the call and
    leaves already written files as they are.
    """

    def __init__(self, fs: FileSystem, *, base_dir: Optional[Path] = None, dry_run: bool = False) -> None:
        self.fs = fs
        self.base_dir = base_dir
        self.dry_run = dry_run

    def _log_action(self, message: str, *args: object) -> None:
        LOGGER.info(action_prefix(self.dry_run) + message, *args)

    async def apply(self, edit: WorkspaceEdit) -> List[ApplyResult]:
        results: List[ApplyResult] = []
        for item in plan_workspace_edit(edit):
            result = await self.apply_item(item)
            if result is not None:
                results.append(result)
        return results

    async def apply_item(self, item: WorkItem) -> Optional[ApplyResult]:
        if isinstance(item, DocumentEditBatch):
            path = uri_to_path(item.uri)
            changes = await self.apply_text_edits(path, item.edits, uri=item.uri)
            return ApplyResult(file=display_path(path, self.base_dir), changes=changes)
        await self.apply_file_operation(item)
        return None

    async def apply_file_operation(self, operation: FileOperation) -> None:
        if isinstance(operation, CreateFile):
            await self._create(operation)
        elif isinstance(operation, DeleteFile):
            await self._delete(operation)
        elif isinstance(operation, RenameFile):
            await self._rename(operation)
        else:
            raise TypeError(f"Unsupported file operation: {operation!r}")

    async def _create(self, operation: CreateFile) -> None:
        if not operation.uri:
            raise MissingTarget("create")
        path = uri_to_path(operation.uri)
        self._log_action("Create file: %s", path)
        if self.dry_run:
            return
        options = operation.options
        if not options.overwrite and options.ignore_if_exists and await self.fs.exists(path):
            LOGGER.info("Skipping create of existing file %s", path)
            return
        await self.fs.create(path, overwrite=options.overwrite)

    async def _delete(self, operation: DeleteFile) -> None:
        if not operation.uri:
            raise MissingTarget("delete")
        path = uri_to_path(operation.uri)
        self._log_action("Delete file: %s", path)
        if self.dry_run:
            return
        options = operation.options
        if options.ignore_if_not_exists and not await self.fs.exists(path):
            LOGGER.info("Skipping delete of missing file %s", path)
            return
        await self.fs.delete(path, recursive=options.recursive)

    async def _rename(self, operation: RenameFile) -> None:
        if not operation.old_uri or not operation.new_uri:
            raise MissingRenameEndpoints(operation.old_uri, operation.new_uri)
        old_path = uri_to_path(operation.old_uri)
        new_path = uri_to_path(operation.new_uri)
        self._log_action("Rename file: %s -> %s", old_path, new_path)
        if self.dry_run:
            return
        options = operation.options
        if not options.overwrite and options.ignore_if_exists and await self.fs.exists(new_path):
            LOGGER.info("Skipping rename onto existing file %s", new_path)
            return
        await self.fs.rename(old_path, new_path, overwrite=options.overwrite)

    async def apply_text_edits(self, path: Path, edits: Sequence[TextEdit], *, uri: Optional[str] = None) -> int:
        """Apply edits to the file at path and return how many were applied."""
        if not edits:
            return 0
        uri = uri or str(path)
        ordered = sort_for_application(edits)
        check_overlaps(ordered, uri)
        self._log_action("Applying %d edits to %s", len(edits), path)
        if self.dry_run:
            for edit in ordered:
                self._log_action("  %s", describe_edit(edit))
            return len(edits)
        content = await self.fs.read_text(path)
        updated = fold_edits(content, ordered)
        await self.fs.write_text(path, updated)
        return len(edits)


async def apply_workspace_edit(
    edit: WorkspaceEdit,
    *,
    dry_run: bool = False,
    base_dir: Optional[Path] = None,
    fs: Optional[FileSystem] = None,
) -> List[ApplyResult]:
    """Apply edit with a LocalFileSystem unless another FileSystem is given."""
    applier = EditApplier(fs or LocalFileSystem(), base_dir=base_dir, dry_run=dry_run)
    return await applier.apply(edit)


__all__ = ["ApplyResult", "EditApplier", "apply_workspace_edit"]
