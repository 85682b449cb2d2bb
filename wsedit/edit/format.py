"""Human-readable rendering of a WorkspaceEdit."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..lsp.messages import CreateFile, DeleteFile, RenameFile, WorkspaceEdit
from ..paths import display_path, uri_to_path
from .plan import DocumentEditBatch, plan_workspace_edit
from .text import describe_edit


def format_workspace_edit(edit: WorkspaceEdit, *, base_dir: Optional[Path] = None) -> str:
    """Render edit top to bottom, in input order, without touching the filesystem."""

    def _path(uri: Optional[str]) -> str:
        return display_path(uri_to_path(uri), base_dir) if uri else "<missing>"

    lines: list[str] = []
    for item in plan_workspace_edit(edit):
        if isinstance(item, DocumentEditBatch):
            lines.append(f"Edit {_path(item.uri)}:")
            lines.extend(f"  {describe_edit(text_edit)}" for text_edit in item.edits)
        elif isinstance(item, CreateFile):
            lines.append(f"Create: {_path(item.uri)}")
        elif isinstance(item, DeleteFile):
            lines.append(f"Delete: {_path(item.uri)}")
        elif isinstance(item, RenameFile):
            lines.append(f"Rename: {_path(item.old_uri)} -> {_path(item.new_uri)}")
    return "\n".join(lines)


__all__ = ["format_workspace_edit"]
