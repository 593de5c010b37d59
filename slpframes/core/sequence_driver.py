"""Frame-by-frame rendering and metadata inspection for sprite assets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from . import RenderOutcome, SpriteAsset
from . import backends, canvas
from .errors import AssetDecodeError, PaletteLoadError
from .frame_writer import PngFrameSink
from .player_colors import map_player_index
from .settings import RenderSettings
from ..utils import file_tools, validators

logger = logging.getLogger(__name__)

SinkFactory = Callable[[Path, int], PngFrameSink]


class SequenceDriver:
    """Drives decode, centring and output for every frame of a sprite."""

    def __init__(
        self,
        settings: RenderSettings,
        decoder_factory: Optional[backends.DecoderFactory] = None,
        palette_parser: Optional[backends.PaletteParser] = None,
        sink_factory: SinkFactory = PngFrameSink,
    ):
        self.settings = settings
        self._decoder_factory = decoder_factory
        self._palette_parser = palette_parser
        self._sink_factory = sink_factory

    @property
    def decoder_factory(self) -> backends.DecoderFactory:
        if self._decoder_factory is None:
            self._decoder_factory = backends.resolve_backend(self.settings.decoder, "decoder")
        return self._decoder_factory

    @property
    def palette_parser(self) -> backends.PaletteParser:
        if self._palette_parser is None:
            self._palette_parser = backends.resolve_backend(self.settings.palette_parser, "palette parser")
        return self._palette_parser

    def load_asset(self, path: Path) -> SpriteAsset:
        validated = validators.validate_sprite_path(path)
        try:
            data = validated.read_bytes()
        except OSError as exc:
            raise AssetDecodeError(validated, reason=str(exc)) from exc
        return backends.decode_asset(data, self.decoder_factory, validated)

    def load_palette(self, path: Optional[Path] = None) -> Any:
        palette_path = validators.validate_palette_path(path or self.settings.palette_path)
        try:
            text = file_tools.read_text_ascii(palette_path)
        except (OSError, UnicodeDecodeError) as exc:
            raise PaletteLoadError(palette_path, reason=str(exc)) from exc
        return backends.parse_palette(text, self.palette_parser, palette_path)

    def render(
        self,
        asset: SpriteAsset,
        palette: Any,
        output_dir: Path,
        player: Optional[int] = None,
        draw_outline: Optional[bool] = None,
    ) -> RenderOutcome:
        """Render every frame, centre it on its hotspot and write it out.

        Frames are processed strictly in index order. Writes happen on the
        sink's thread pool; this method returns only after all of them have
        completed. Canvases with no rows or no columns are skipped, so their
        index has no file; every other frame is on disk when this returns.
        """

        outcome = RenderOutcome(output_dir=output_dir)
        if asset.header.num_frames == 0:
            logger.info("%s has no frames; nothing to write", asset.path)
            return outcome

        slot = map_player_index(self.settings.player if player is None else player)
        outline = self.settings.draw_outline if draw_outline is None else draw_outline

        with self._sink_factory(output_dir, self.settings.max_workers) as sink:
            for descriptor in asset.frames:
                rendered = backends.render_asset_frame(
                    asset, descriptor.index, palette, player=slot, draw_outline=outline
                )
                normalized = canvas.normalize_frame(
                    rendered.data,
                    rendered.width,
                    rendered.height,
                    descriptor.hotspot_x,
                    descriptor.hotspot_y,
                )
                sink.submit(descriptor.index, normalized)
            outcome.frame_paths = sink.wait()

        logger.info("Wrote %s frames to %s", outcome.frame_count, output_dir)
        return outcome

    def inspect(self, asset: SpriteAsset) -> str:
        """Describe the header and every frame without rendering anything."""

        header = asset.header
        lines = [
            f"Version: {header.version}",
            f"Comment: {header.comment}",
            f"Frames ({header.num_frames}):",
        ]
        for frame in asset.frames:
            lines.extend(
                [
                    f"#{frame.index}",
                    f"  Size: {frame.width}x{frame.height}",
                    f"  Center: {frame.hotspot_x}x{frame.hotspot_y}",
                    f"  Properties: {frame.properties}",
                ]
            )
        return "\n".join(lines)

    def run(self, source: Path, output_dir: Path) -> RenderOutcome:
        """Load the sprite and palette, then render every frame to ``output_dir``."""

        asset = self.load_asset(source)
        palette = self.load_palette()
        return self.render(asset, palette, output_dir)

    def run_inspect(self, source: Path) -> str:
        return self.inspect(self.load_asset(source))
