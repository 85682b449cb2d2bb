"""Typed LSP messages describing workspace edits."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

import orjson
from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator


class LspModel(BaseModel):
    """Base model accepting both camelCase wire names and snake_case field names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Position(LspModel):
    line: int = Field(ge=0)
    character: int = Field(ge=0)

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.character)


class Range(LspModel):
    start: Position
    end: Position

    @model_validator(mode="after")
    def check_order(self) -> "Range":
        if self.start.as_tuple() > self.end.as_tuple():
            raise ValueError("range start must not be after range end")
        return self


class TextEdit(LspModel):
    range: Range
    new_text: str = Field(alias="newText")
    annotation_id: Optional[str] = Field(default=None, alias="annotationId")


class ChangeAnnotation(LspModel):
    label: str
    needs_confirmation: bool = Field(default=False, alias="needsConfirmation")
    description: Optional[str] = None


class TextDocumentIdentifier(LspModel):
    uri: str
    version: Optional[int] = None


class TextDocumentEdit(LspModel):
    text_document: TextDocumentIdentifier = Field(alias="textDocument")
    edits: List[TextEdit] = Field(default_factory=list)


class CreateFileOptions(LspModel):
    overwrite: bool = False
    ignore_if_exists: bool = Field(default=False, alias="ignoreIfExists")


class RenameFileOptions(LspModel):
    overwrite: bool = False
    ignore_if_exists: bool = Field(default=False, alias="ignoreIfExists")


class DeleteFileOptions(LspModel):
    recursive: bool = False
    ignore_if_not_exists: bool = Field(default=False, alias="ignoreIfNotExists")


class CreateFile(LspModel):
    kind: Literal["create"] = "create"
    uri: Optional[str] = None
    options: CreateFileOptions = Field(default_factory=CreateFileOptions)
    annotation_id: Optional[str] = Field(default=None, alias="annotationId")


class RenameFile(LspModel):
    kind: Literal["rename"] = "rename"
    old_uri: Optional[str] = Field(default=None, alias="oldUri")
    new_uri: Optional[str] = Field(default=None, alias="newUri")
    options: RenameFileOptions = Field(default_factory=RenameFileOptions)
    annotation_id: Optional[str] = Field(default=None, alias="annotationId")


class DeleteFile(LspModel):
    kind: Literal["delete"] = "delete"
    uri: Optional[str] = None
    options: DeleteFileOptions = Field(default_factory=DeleteFileOptions)
    annotation_id: Optional[str] = Field(default=None, alias="annotationId")


FileOperation = Union[CreateFile, RenameFile, DeleteFile]


def _change_tag(value: Any) -> str:
    """Pick the documentChanges variant: file operations carry ``kind``, text edits do not."""
    if isinstance(value, dict):
        return str(value.get("kind", "edit"))
    return str(getattr(value, "kind", "edit"))


DocumentChange = Annotated[
    Union[
        Annotated[CreateFile, Tag("create")],
        Annotated[RenameFile, Tag("rename")],
        Annotated[DeleteFile, Tag("delete")],
        Annotated[TextDocumentEdit, Tag("edit")],
    ],
    Discriminator(_change_tag),
]


class WorkspaceEdit(LspModel):
    changes: Optional[Dict[str, List[TextEdit]]] = None
    document_changes: Optional[List[DocumentChange]] = Field(default=None, alias="documentChanges")
    change_annotations: Dict[str, ChangeAnnotation] = Field(default_factory=dict, alias="changeAnnotations")

    @classmethod
    def from_json(cls, payload: bytes | str) -> "WorkspaceEdit":
        """Parse a raw JSON WorkspaceEdit document."""
        return cls.model_validate(orjson.loads(payload))


__all__ = [
    "ChangeAnnotation",
    "CreateFile",
    "CreateFileOptions",
    "DeleteFile",
    "DeleteFileOptions",
    "DocumentChange",
    "FileOperation",
    "Position",
    "Range",
    "RenameFile",
    "RenameFileOptions",
    "TextDocumentEdit",
    "TextDocumentIdentifier",
    "TextEdit",
    "WorkspaceEdit",
]
