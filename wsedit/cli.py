"""Command-line interface for wsedit."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .config import WsEditConfig
from .edit.applier import apply_workspace_edit
from .edit.format import format_workspace_edit
from .errors import WorkspaceEditError
from .logging import configure_logging, get_logger
from .lsp.fs import LocalFileSystem
from .lsp.messages import WorkspaceEdit

app = typer.Typer(help="Apply LSP workspace edits to files on disk.")
LOGGER = get_logger(__name__)

CONFIG_FILE = "wsedit.yaml"


@app.callback()
def main() -> None:
    """wsedit CLI root."""
    return None


def _load_yaml_config(base_dir: Path) -> dict[str, object]:
    config_path = base_dir / CONFIG_FILE
    if not config_path.exists():
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise typer.BadParameter(f"Failed to parse {config_path}: {error}") from error
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{CONFIG_FILE} must contain a mapping")
    return data


def _merge_config(base_dir: Path, cli_options: dict[str, object]) -> WsEditConfig:
    file_overrides = _load_yaml_config(base_dir)
    explicit = {key: value for key, value in cli_options.items() if value is not None}
    merged: dict[str, object] = {**file_overrides, **explicit, "base_dir": base_dir}
    try:
        return WsEditConfig(**merged)
    except ValidationError as error:
        LOGGER.error("Invalid configuration in %s: %s", base_dir / CONFIG_FILE, error)
        raise typer.Exit(code=1) from error


def _read_payload(payload: str) -> WorkspaceEdit:
    if payload == "-":
        raw = sys.stdin.read()
    else:
        source = Path(payload)
        if not source.is_file():
            raise typer.BadParameter(f"WorkspaceEdit file not found: {source}")
        raw = source.read_bytes()
    try:
        return WorkspaceEdit.from_json(raw)
    except (ValueError, ValidationError) as error:
        LOGGER.error("Invalid WorkspaceEdit payload: %s", error)
        raise typer.Exit(code=1) from error


@app.command("apply")
def apply(
    payload: str = typer.Argument(..., help="WorkspaceEdit JSON file, or '-' for stdin."),
    dry_run: Optional[bool] = typer.Option(None, "--dry-run/--no-dry-run", help="Preview changes without applying."),
    base_dir: Path = typer.Option(Path("."), file_okay=False, help="Directory that result paths are relative to."),
    log_level: Optional[str] = typer.Option(None, help="Log level."),
) -> None:
    configure_logging(log_level or "INFO")
    base = base_dir.resolve()
    config = _merge_config(base, {"dry_run": dry_run, "log_level": log_level})
    if config.log_level != (log_level or "INFO"):
        configure_logging(config.log_level)

    edit = _read_payload(payload)
    fs = LocalFileSystem(encoding=config.encoding)
    try:
        results = asyncio.run(
            apply_workspace_edit(edit, dry_run=config.dry_run, base_dir=config.base_dir, fs=fs)
        )
    except (WorkspaceEditError, OSError) as error:
        LOGGER.error("Failed to apply workspace edit: %s", error)
        raise typer.Exit(code=1) from error

    for result in results:
        noun = "change" if result.changes == 1 else "changes"
        typer.echo(f"{result.file}: {result.changes} {noun}")
    if not results:
        LOGGER.info("No text edits to apply.")


@app.command("preview")
def preview(
    payload: str = typer.Argument(..., help="WorkspaceEdit JSON file, or '-' for stdin."),
    base_dir: Optional[Path] = typer.Option(None, file_okay=False, help="Show paths relative to this directory."),
) -> None:
    configure_logging()
    edit = _read_payload(payload)
    rendered = format_workspace_edit(edit, base_dir=base_dir.resolve() if base_dir else None)
    if rendered:
        typer.echo(rendered)


__all__ = ["app"]
