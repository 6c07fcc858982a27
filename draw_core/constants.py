"""Game constants and keep-mode tags shared by the model and the UI."""

from __future__ import annotations

from typing import Final, Literal

KeepMode = Literal["keep", "no_keep"]

KEEP: Final[KeepMode] = "keep"
NO_KEEP: Final[KeepMode] = "no_keep"
KEEP_MODES: Final[tuple[KeepMode, ...]] = (KEEP, NO_KEEP)

DECK_SIZE: Final[int] = 40
OPENING_HAND_SIZE: Final[int] = 4
POST_HAND_DECK_SIZE: Final[int] = DECK_SIZE - OPENING_HAND_SIZE

MAX_TARGET_COUNT: Final[int] = DECK_SIZE
MAX_MULLIGAN_COUNT: Final[int] = DECK_SIZE
MAX_DRAW_COUNT: Final[int] = DECK_SIZE
# Redraws can never exceed the opening hand once it has already missed.
MAX_REDRAW_COUNT: Final[int] = OPENING_HAND_SIZE
