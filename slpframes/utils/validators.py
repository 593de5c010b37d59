"""Validation helpers for user inputs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..core.errors import AssetDecodeError, PaletteLoadError, ValidationError


def validate_sprite_path(path: Path | None) -> Path:
    """Ensure the sprite path points at an existing file."""

    if not path:
        raise AssetDecodeError(Path("<unset>"), reason="No path provided")
    if not path.exists():
        raise AssetDecodeError(path, reason="File not found")
    if not path.is_file():
        raise AssetDecodeError(path, reason="Not a file")
    return path


def validate_palette_path(path: Path | None) -> Path:
    """Ensure the palette path points at an existing file."""

    if not path:
        raise PaletteLoadError(Path("<unset>"), reason="No path provided")
    if not path.exists():
        raise PaletteLoadError(path, reason="File not found")
    return path


def parse_optional_int(value: str | int | None, field: str) -> Optional[int]:
    """Parse an integer from a string value, if provided."""

    if value is None or value == "":
        return None
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except ValueError as exc:
        raise ValidationError(f"{field} must be an integer") from exc


def validate_backend_reference(value: str | None, field: str) -> Optional[str]:
    """Ensure a backend reference looks like ``package.module:attribute``."""

    if value is None or value.strip() == "":
        return None
    module, sep, attr = value.strip().partition(":")
    if not sep or not module or not attr:
        raise ValidationError(f"{field} must look like 'package.module:attribute'")
    return f"{module}:{attr}"
