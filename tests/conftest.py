from dataclasses import dataclass, field
from types import SimpleNamespace

import pytest


@dataclass
class FakeFrame:
    width: int
    height: int
    hotspot: tuple[int, int]
    properties: int = 0


@dataclass
class FakeDecoder:
    """Stands in for an SLP decoder; pixels encode the frame index."""

    frames: list[FakeFrame]
    version: str = "2.0N"
    comment: str = "ArtDesk 1.00 SLP Writer"
    calls: list[tuple] = field(default_factory=list)
    header_parsed: bool = False

    @property
    def num_frames(self) -> int:
        return len(self.frames)

    def parse_header(self):
        self.header_parsed = True

    def render_frame(self, index, palette, *, player, draw_outline):
        self.calls.append((index, palette, player, draw_outline))
        frame = self.frames[index]
        pixel = bytes([index + 1, player, int(draw_outline), 255])
        return SimpleNamespace(width=frame.width, height=frame.height, data=pixel * (frame.width * frame.height))


@pytest.fixture
def fake_frame():
    return FakeFrame


@pytest.fixture
def make_decoder():
    def factory(*frames):
        decoder = FakeDecoder(frames=list(frames))
        return decoder, (lambda data: decoder)

    return factory


@pytest.fixture
def palette_parser():
    def parse(text):
        if not text.startswith("JASC-PAL"):
            raise ValueError("not a JASC-PAL file")
        return {"source": text}

    return parse


@pytest.fixture
def palette_file(tmp_path):
    path = tmp_path / "palette.pal"
    path.write_text("JASC-PAL\n0100\n256\n", encoding="ascii")
    return path


@pytest.fixture
def sprite_file(tmp_path):
    path = tmp_path / "unit.slp"
    path.write_bytes(b"2.0N")
    return path
