"""Core data model for sprite frame rendering."""

__all__ = [
    "SpriteHeader",
    "FrameDescriptor",
    "SpriteAsset",
    "RenderedFrame",
    "NormalizedCanvas",
    "RenderOutcome",
]

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import numpy as np


@dataclass(frozen=True)
class SpriteHeader:
    """Header fields reported by the sprite decoder."""

    version: str
    comment: str
    num_frames: int


@dataclass(frozen=True)
class FrameDescriptor:
    """Geometry and flags for a single frame, as declared by the asset."""

    index: int
    width: int
    height: int
    hotspot_x: int
    hotspot_y: int
    properties: Any = None


@dataclass(frozen=True)
class SpriteAsset:
    """A decoded sprite: header, frame descriptors and the decoder that renders them."""

    path: Optional[Path]
    header: SpriteHeader
    frames: tuple[FrameDescriptor, ...]
    decoder: Any = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class RenderedFrame:
    """RGBA pixels for one frame, row-major, 4 bytes per pixel."""

    width: int
    height: int
    data: bytes


@dataclass(frozen=True)
class NormalizedCanvas:
    """A padded frame whose hotspot sits at the canvas centre."""

    width: int
    height: int
    pixels: np.ndarray = field(repr=False, compare=False)
    offset_x: int = 0
    offset_y: int = 0

    @property
    def hotspot(self) -> tuple[int, int]:
        return self.width // 2, self.height // 2

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()


@dataclass
class RenderOutcome:
    """Result of a rendering run."""

    output_dir: Path
    frame_paths: list[Path] = field(default_factory=list)

    @property
    def frame_count(self) -> int:
        return len(self.frame_paths)
