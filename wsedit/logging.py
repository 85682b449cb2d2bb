"""Logging utilities."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

DRY_RUN_PREFIX = "[DRY RUN] "


def configure_logging(level: str = "INFO", *, rich_tracebacks: bool = True) -> None:
    """Configure root logger for the CLI."""
    console = Console(stderr=True)
    handler = RichHandler(console=console, rich_tracebacks=rich_tracebacks, markup=False, show_path=False)
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str, *extra_names: str) -> logging.Logger:
    """Return a namespaced logger."""
    namespace = ".".join([name, *extra_names]) if extra_names else name
    return logging.getLogger(namespace)


def action_prefix(dry_run: bool) -> str:
    """Return the prefix used on action lines so preview and real runs line up."""
    return DRY_RUN_PREFIX if dry_run else ""


__all__ = ["DRY_RUN_PREFIX", "action_prefix", "configure_logging", "get_logger"]
