"""Configuration models for wsedit."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class WsEditConfig(BaseModel):
    base_dir: Path = Field(default_factory=Path.cwd)
    dry_run: bool = False
    encoding: str = "utf-8"
    log_level: str = "INFO"


__all__ = ["WsEditConfig"]
