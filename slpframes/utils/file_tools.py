"""Filesystem helpers."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> Path:
    """Create a directory if it does not exist."""

    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Ensured directory exists: %s", path)
    return path


def frame_output_path(output_dir: Path, index: int) -> Path:
    """Return the PNG path for a frame, named by its zero-based index."""

    return output_dir / f"{index}.png"


def read_text_ascii(path: Path) -> str:
    """Read a text resource such as a JASC-PAL palette."""

    return path.read_text(encoding="ascii")
