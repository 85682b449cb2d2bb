"""Normalize both WorkspaceEdit shapes into one ordered list of work items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from ..lsp.messages import CreateFile, DeleteFile, RenameFile, TextDocumentEdit, TextEdit, WorkspaceEdit


@dataclass(frozen=True, slots=True)
class DocumentEditBatch:
    """Text edits targeting a single document, in input order."""

    uri: str
    edits: tuple[TextEdit, ...]


WorkItem = Union[CreateFile, RenameFile, DeleteFile, DocumentEditBatch]


def plan_workspace_edit(edit: WorkspaceEdit) -> List[WorkItem]:
    """Return work items in execution order.

    ``documentChanges`` wins when both shapes are present. Legacy ``changes``
    follow the insertion order of the payload mapping.
    """
    if edit.document_changes is not None:
        items: List[WorkItem] = []
        for change in edit.document_changes:
            if isinstance(change, TextDocumentEdit):
                items.append(DocumentEditBatch(uri=change.text_document.uri, edits=tuple(change.edits)))
            else:
                items.append(change)
        return items
    if edit.changes is not None:
        return [DocumentEditBatch(uri=uri, edits=tuple(edits)) for uri, edits in edit.changes.items()]
    return []


__all__ = ["DocumentEditBatch", "WorkItem", "plan_workspace_edit"]
