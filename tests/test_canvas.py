import numpy as np
import pytest

from slpframes.core.canvas import compute_padding, normalize_frame
from slpframes.core.errors import FrameGeometryError


def _random_frame(rng, width, height):
    return rng.integers(1, 256, size=(height, width, 4), dtype=np.uint8)


def test_four_by_four_with_hotspot_at_one_one():
    frame = np.arange(4 * 4 * 4, dtype=np.uint8).reshape(4, 4, 4)
    result = normalize_frame(frame.tobytes(), 4, 4, 1, 1)

    assert (result.width, result.height) == (6, 6)
    assert result.hotspot == (3, 3)
    assert (result.offset_x, result.offset_y) == (2, 2)
    assert result.pixels[2, 2].tolist() == frame[0, 0].tolist()
    assert not result.pixels[:2].any()
    assert not result.pixels[:, :2].any()


def test_hotspot_past_centre_pads_after_content():
    frame = np.full((2, 4, 4), 9, dtype=np.uint8)
    result = normalize_frame(frame.tobytes(), 4, 2, 5, 3)

    # centre (2, 1): diff (3, 2)
    assert (result.width, result.height) == (10, 6)
    assert (result.offset_x, result.offset_y) == (0, 0)
    assert result.hotspot == (5, 3)
    assert (result.pixels[:2, :4] == 9).all()
    assert not result.pixels[2:].any()
    assert not result.pixels[:, 4:].any()


def test_centred_hotspot_leaves_frame_untouched():
    frame = np.full((3, 5, 4), 7, dtype=np.uint8)
    result = normalize_frame(frame.tobytes(), 5, 3, 2, 1)
    assert (result.width, result.height) == (5, 3)
    assert np.array_equal(result.pixels, frame)


@pytest.mark.parametrize("seed", range(40))
def test_hotspot_centred_and_content_preserved(seed):
    rng = np.random.default_rng(seed)
    width = int(rng.integers(1, 24))
    height = int(rng.integers(1, 24))
    hotspot_x = int(rng.integers(-30, 55))
    hotspot_y = int(rng.integers(-30, 55))
    frame = _random_frame(rng, width, height)

    result = normalize_frame(frame.tobytes(), width, height, hotspot_x, hotspot_y)

    assert result.width == width + 2 * abs(width // 2 - hotspot_x)
    assert result.height == height + 2 * abs(height // 2 - hotspot_y)
    assert (hotspot_x + result.offset_x, hotspot_y + result.offset_y) == (result.width // 2, result.height // 2)
    assert result.pixels.shape == (result.height, result.width, 4)

    ox, oy = result.offset_x, result.offset_y
    assert np.array_equal(result.pixels[oy : oy + height, ox : ox + width], frame)
    mask = np.ones((result.height, result.width), dtype=bool)
    mask[oy : oy + height, ox : ox + width] = False
    assert not result.pixels[mask].any()


def test_zero_sized_frame_is_all_padding():
    result = normalize_frame(b"", 0, 0, 3, -2)
    assert (result.width, result.height) == (6, 4)
    assert result.hotspot == (3, 2)
    assert not result.pixels.any()


def test_accepts_numpy_input():
    frame = np.ones((2, 2, 4), dtype=np.uint8)
    result = normalize_frame(frame, 2, 2, 0, 0)
    assert (result.width, result.height) == (4, 4)
    assert result.tobytes() == result.pixels.tobytes()


def test_buffer_size_mismatch_raises():
    with pytest.raises(FrameGeometryError):
        normalize_frame(b"\x00" * 15, 2, 2, 1, 1)


def test_negative_dimensions_raise():
    with pytest.raises(FrameGeometryError):
        compute_padding(-1, 4, 0, 0)


def test_compute_padding_reports_diffs():
    padding = compute_padding(7, 5, 0, 6)
    # centre (3, 2)
    assert (padding.diff_x, padding.diff_y) == (3, 4)
    assert (padding.width, padding.height) == (13, 13)
    assert (padding.offset_x, padding.offset_y) == (6, 0)
