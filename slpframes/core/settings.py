"""Run configuration for the rendering pipeline."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils import validators
from .player_colors import DEFAULT_PLAYER

PACKAGE_DIR = Path(__file__).resolve().parents[1]
BUNDLED_PALETTE_PATH = PACKAGE_DIR / "data" / "default-palette.pal"
MAX_WRITER_THREADS = 32


def default_palette_path() -> Path:
    override = os.environ.get("SLP_RENDER_PALETTE", "").strip()
    return Path(override) if override else BUNDLED_PALETTE_PATH


def _env_or_none(name: str) -> Optional[str]:
    value = os.environ.get(name, "").strip()
    return value or None


class RenderSettings(BaseModel):
    """Settings shared by render and inspect runs."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    palette_path: Path = Field(default_factory=default_palette_path)
    player: int = DEFAULT_PLAYER
    draw_outline: bool = False
    decoder: Optional[str] = Field(default_factory=lambda: _env_or_none("SLP_RENDER_DECODER"))
    palette_parser: Optional[str] = Field(default_factory=lambda: _env_or_none("SLP_RENDER_PALETTE_PARSER"))
    max_workers: int = Field(
        default_factory=lambda: os.environ.get("SLP_RENDER_WORKERS", "4"),
        ge=1,
        le=MAX_WRITER_THREADS,
    )

    @field_validator("palette_path", mode="before")
    @classmethod
    def _default_palette(cls, value):
        if value in (None, ""):
            return default_palette_path()
        return value

    @field_validator("player", mode="before")
    @classmethod
    def _parse_player(cls, value):
        parsed = validators.parse_optional_int(value, "Player")
        return DEFAULT_PLAYER if parsed is None else parsed

    @field_validator("decoder", "palette_parser", mode="before")
    @classmethod
    def _parse_backend(cls, value, info):
        if value is None:
            return None
        return validators.validate_backend_reference(value, info.field_name)
