"""Hotspot-centred canvas padding for rendered frames."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from . import NormalizedCanvas
from .errors import FrameGeometryError

logger = logging.getLogger(__name__)
CHANNELS = 4


@dataclass(frozen=True)
class Padding:
    """Canvas geometry needed to centre a hotspot."""

    diff_x: int
    diff_y: int
    width: int
    height: int
    offset_x: int
    offset_y: int


def compute_padding(width: int, height: int, hotspot_x: int, hotspot_y: int) -> Padding:
    """Work out the padded canvas size and where the source frame lands in it.

    The canvas grows by twice the hotspot's distance from the frame centre on
    each axis. Placing the frame at ``new_size // 2 - hotspot`` then puts the
    hotspot exactly on the canvas centre (integer-truncated). That offset is
    ``2 * diff`` when the hotspot sits before the centre and ``0`` otherwise,
    so the frame always fits.
    """

    if width < 0 or height < 0:
        raise FrameGeometryError(f"Frame dimensions must be non-negative, got {width}x{height}")

    diff_x = abs(width // 2 - hotspot_x)
    diff_y = abs(height // 2 - hotspot_y)
    new_width = width + 2 * diff_x
    new_height = height + 2 * diff_y
    return Padding(
        diff_x=diff_x,
        diff_y=diff_y,
        width=new_width,
        height=new_height,
        offset_x=new_width // 2 - hotspot_x,
        offset_y=new_height // 2 - hotspot_y,
    )


def normalize_frame(
    buffer: bytes | bytearray | memoryview | np.ndarray,
    width: int,
    height: int,
    hotspot_x: int,
    hotspot_y: int,
) -> NormalizedCanvas:
    """Pad an RGBA frame with transparent pixels so its hotspot is centred."""

    padding = compute_padding(width, height, hotspot_x, hotspot_y)
    if isinstance(buffer, np.ndarray):
        source = np.ascontiguousarray(buffer, dtype=np.uint8).reshape(-1)
    else:
        source = np.frombuffer(buffer, dtype=np.uint8)
    expected = width * height * CHANNELS
    if source.size != expected:
        raise FrameGeometryError(
            f"Buffer holds {source.size} bytes but a {width}x{height} RGBA frame needs {expected}"
        )

    pixels = np.zeros((padding.height, padding.width, CHANNELS), dtype=np.uint8)
    pixels[
        padding.offset_y : padding.offset_y + height,
        padding.offset_x : padding.offset_x + width,
    ] = source.reshape(height, width, CHANNELS)

    logger.debug(
        "Padded %sx%s frame (hotspot %s,%s) to %sx%s at offset %s,%s",
        width,
        height,
        hotspot_x,
        hotspot_y,
        padding.width,
        padding.height,
        padding.offset_x,
        padding.offset_y,
    )
    return NormalizedCanvas(
        width=padding.width,
        height=padding.height,
        pixels=pixels,
        offset_x=padding.offset_x,
        offset_y=padding.offset_y,
    )
