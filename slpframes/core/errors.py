"""Domain-specific exceptions for SLP frame rendering."""

from pathlib import Path


class SlpRenderError(Exception):
    """Base class for errors raised by the rendering pipeline."""


class AssetDecodeError(SlpRenderError):
    """Raised when a sprite file is missing, malformed or truncated."""

    def __init__(self, path: Path, reason: str | None = None):
        message = f"Could not decode sprite: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PaletteLoadError(SlpRenderError):
    """Raised when the palette file is missing or cannot be parsed."""

    def __init__(self, path: Path, reason: str | None = None):
        message = f"Could not load palette: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ValidationError(SlpRenderError, ValueError):
    """Raised when user-provided settings fail validation."""


class FrameGeometryError(SlpRenderError, ValueError):
    """Raised when a pixel buffer does not match its declared dimensions."""


class BackendUnavailableError(SlpRenderError):
    """Raised when the sprite decoder or palette parser cannot be resolved."""
