"""Resolution of the external sprite decoder and palette parser."""

from __future__ import annotations

import importlib
import struct
import logging
from pathlib import Path
from typing import Any, Callable, Protocol, Sequence

from . import FrameDescriptor, RenderedFrame, SpriteAsset, SpriteHeader
from .errors import AssetDecodeError, BackendUnavailableError, PaletteLoadError

logger = logging.getLogger(__name__)


class SpriteDecoder(Protocol):
    """What the pipeline needs from a decoded SLP file."""

    version: Any
    comment: Any
    num_frames: int
    frames: Sequence[Any]

    def parse_header(self) -> Any: ...

    def render_frame(self, index: int, palette: Any, *, player: int, draw_outline: bool) -> Any: ...


DecoderFactory = Callable[[bytes], SpriteDecoder]
PaletteParser = Callable[[str], Any]


def resolve_backend(reference: str | None, kind: str) -> Callable[..., Any]:
    """Import ``package.module:attribute`` and return the attribute."""

    if not reference:
        raise BackendUnavailableError(
            f"No {kind} configured. Pass --{kind.replace(' ', '-')}=package.module:callable "
            f"or set the matching SLP_RENDER_* environment variable."
        )
    module_name, _, attr = reference.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        raise BackendUnavailableError(f"{kind} module '{module_name}' is not installed.") from exc
    try:
        backend = getattr(module, attr)
    except AttributeError as exc:
        raise BackendUnavailableError(f"{kind} '{reference}' does not exist.") from exc
    if not callable(backend):
        raise BackendUnavailableError(f"{kind} '{reference}' is not callable.")
    logger.debug("Resolved %s backend %s", kind, reference)
    return backend


def describe_frame(index: int, frame: Any) -> FrameDescriptor:
    """Convert a decoder frame record into a FrameDescriptor."""

    hotspot = frame.hotspot
    if isinstance(hotspot, (tuple, list)):
        hotspot_x, hotspot_y = hotspot
    else:
        hotspot_x, hotspot_y = hotspot.x, hotspot.y
    return FrameDescriptor(
        index=index,
        width=int(frame.width),
        height=int(frame.height),
        hotspot_x=int(hotspot_x),
        hotspot_y=int(hotspot_y),
        properties=getattr(frame, "properties", None),
    )


def decode_asset(data: bytes, factory: DecoderFactory, path: Path | None = None) -> SpriteAsset:
    """Build a decoder over raw bytes and read its header and frame table."""

    label = path or Path("<memory>")
    try:
        decoder = factory(data)
        decoder.parse_header()
        header = SpriteHeader(
            version=str(decoder.version),
            comment=str(decoder.comment),
            num_frames=int(decoder.num_frames),
        )
        frames = tuple(describe_frame(i, frame) for i, frame in enumerate(decoder.frames))
    except (ValueError, TypeError, AttributeError, IndexError, KeyError, EOFError, struct.error) as exc:
        raise AssetDecodeError(label, reason=str(exc) or type(exc).__name__) from exc

    if len(frames) != header.num_frames:
        raise AssetDecodeError(
            label, reason=f"header declares {header.num_frames} frames but {len(frames)} were found"
        )
    logger.info("Loaded %s: version %s, %s frames", label, header.version, header.num_frames)
    return SpriteAsset(path=path, header=header, frames=frames, decoder=decoder)


def render_asset_frame(
    asset: SpriteAsset,
    index: int,
    palette: Any,
    *,
    player: int,
    draw_outline: bool,
) -> RenderedFrame:
    """Ask the decoder to rasterise one frame to RGBA."""

    try:
        rendered = asset.decoder.render_frame(index, palette, player=player, draw_outline=draw_outline)
        data = rendered.data
        if hasattr(data, "tobytes"):
            data = data.tobytes()
        return RenderedFrame(width=int(rendered.width), height=int(rendered.height), data=bytes(data))
    except (ValueError, TypeError, AttributeError, IndexError, KeyError, EOFError, struct.error) as exc:
        raise AssetDecodeError(
            asset.path or Path("<memory>"), reason=f"frame {index}: {exc or type(exc).__name__}"
        ) from exc


def parse_palette(text: str, parser: PaletteParser, path: Path) -> Any:
    """Run the palette parser, wrapping its failures."""

    try:
        palette = parser(text)
    except (ValueError, TypeError, IndexError, KeyError) as exc:
        raise PaletteLoadError(path, reason=str(exc) or type(exc).__name__) from exc
    logger.debug("Loaded palette %s", path)
    return palette
