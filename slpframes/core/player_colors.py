"""Player colour selection to palette slot mapping."""

from __future__ import annotations

DEFAULT_PLAYER = 1

# SLP palettes order three player colours differently from the in-game picker.
# Keys are in-game colour numbers, values the slot the decoder expects.
PLAYER_INDEX_MAP = {
    5: 6,  # cyan
    6: 7,  # magenta
    7: 5,  # orange
}


def map_player_index(selection: int | None) -> int:
    """Return the decoder slot for an in-game player colour."""

    if selection is None:
        return DEFAULT_PLAYER
    return PLAYER_INDEX_MAP.get(selection, selection)
