import json
import struct
from pathlib import Path
from types import SimpleNamespace

import pytest

from slpframes.core import backends
from slpframes.core.errors import AssetDecodeError, BackendUnavailableError, PaletteLoadError


def test_resolve_backend_imports_attribute():
    assert backends.resolve_backend("json:loads", "decoder") is json.loads


@pytest.mark.parametrize(
    "reference",
    [None, "", "no_such_module_for_slp:decode", "json:no_such_attr", "json:__doc__"],
)
def test_resolve_backend_rejects_unusable_references(reference):
    with pytest.raises(BackendUnavailableError):
        backends.resolve_backend(reference, "decoder")


def test_describe_frame_accepts_point_hotspot():
    frame = SimpleNamespace(width=10, height=20, hotspot=SimpleNamespace(x=-4, y=31), properties=24)
    descriptor = backends.describe_frame(3, frame)
    assert (descriptor.index, descriptor.width, descriptor.height) == (3, 10, 20)
    assert (descriptor.hotspot_x, descriptor.hotspot_y) == (-4, 31)
    assert descriptor.properties == 24


def test_decode_asset_reads_header_and_frames(make_decoder, fake_frame):
    decoder, factory = make_decoder(fake_frame(10, 20, (5, 18)), fake_frame(12, 22, (6, 21), properties=8))
    asset = backends.decode_asset(b"data", factory, Path("unit.slp"))

    assert decoder.header_parsed
    assert asset.header.num_frames == 2
    assert asset.header.version == "2.0N"
    assert [f.width for f in asset.frames] == [10, 12]
    assert asset.frames[1].properties == 8


def test_decode_asset_wraps_decoder_failures():
    def broken(data):
        raise ValueError("truncated frame table")

    with pytest.raises(AssetDecodeError, match="truncated frame table"):
        backends.decode_asset(b"", broken, Path("bad.slp"))


def test_render_asset_frame_wraps_decoder_failures(make_decoder, fake_frame):
    _, factory = make_decoder(fake_frame(1, 1, (0, 0)))
    asset = backends.decode_asset(b"", factory)
    with pytest.raises(AssetDecodeError, match="frame 4"):
        backends.render_asset_frame(asset, 4, None, player=1, draw_outline=False)


def test_parse_palette_wraps_parser_failures(palette_parser):
    with pytest.raises(PaletteLoadError):
        backends.parse_palette("garbage", palette_parser, Path("x.pal"))


def test_decode_asset_wraps_struct_errors():
    def truncated(data):
        return struct.unpack("<I", data)

    with pytest.raises(AssetDecodeError):
        backends.decode_asset(b"\x01", truncated, Path("short.slp"))
