"""Domain constants, UI defaults, and preset-file helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from loguru import logger

from .constants import (  # noqa: F401  re-exported for UI callers
    DECK_SIZE,
    KEEP,
    KEEP_MODES,
    MAX_DRAW_COUNT,
    MAX_MULLIGAN_COUNT,
    MAX_REDRAW_COUNT,
    MAX_TARGET_COUNT,
    NO_KEEP,
    OPENING_HAND_SIZE,
    POST_HAND_DECK_SIZE,
    KeepMode,
)
from .models import SweepPreset

KEEP_MODE_LABELS: Final[dict[str, str]] = {
    KEEP: "キープする",
    NO_KEEP: "キープしない",
}

# ---- UI ranges and defaults --------------------------------------------------

UI_TARGET_RANGE: Final[tuple[int, int]] = (0, 20)
UI_DRAW_RANGE: Final[tuple[int, int]] = (0, 40)
UI_MULLIGAN_CHOICES: Final[tuple[int, ...]] = tuple(range(OPENING_HAND_SIZE + 1))

DEFAULT_KEEP_MODE: Final[KeepMode] = KEEP
DEFAULT_MULLIGAN_COUNT: Final[int] = 0
DEFAULT_TARGET_RANGE: Final[tuple[int, int]] = (3, 3)
DEFAULT_DRAW_RANGE: Final[tuple[int, int]] = (1, 9)

DEFAULT_SEARCH_TARGET_COUNT: Final[int] = 3
DEFAULT_SEARCH_DRAW_RANGE: Final[tuple[int, int]] = (1, 12)

# ---- Sweep presets -----------------------------------------------------------

SWEEP_PRESETS_FILENAME: Final[str] = "sweep_presets.json"


def preset_out_of_bounds(preset: SweepPreset) -> str | None:
    """Return why ``preset`` does not fit the UI widgets, or ``None`` if it does."""

    if preset.mulligan_count not in UI_MULLIGAN_CHOICES:
        return f"mulligan_count {preset.mulligan_count} not in {list(UI_MULLIGAN_CHOICES)}"
    for field, sweep, bounds in (
        ("target_range", preset.target_range, UI_TARGET_RANGE),
        ("draw_range", preset.draw_range, UI_DRAW_RANGE),
    ):
        if sweep.start < bounds[0] or sweep.stop > bounds[1]:
            return f"{field} {list(sweep.as_tuple())} outside {list(bounds)}"
    return None


def load_sweep_presets(preset_path: str | Path | None) -> dict[str, SweepPreset]:
    """Load named sweep presets from the given JSON file.

    The file holds an object mapping preset names to objects with the keys
    ``keep_mode``, ``mulligan_count``, ``target_range`` and ``draw_range``.
    A missing or unreadable file yields an empty mapping; entries that do not
    validate, or whose values fall outside the UI widget bounds, are skipped.
    """

    if not preset_path:
        return {}

    path = Path(preset_path)
    try:
        raw_data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"Ignoring unreadable preset file {path}: {exc}")
        return {}

    if not isinstance(raw_data, Mapping):
        logger.warning(f"Ignoring preset file {path}: top level is not an object")
        return {}

    presets: dict[str, SweepPreset] = {}
    for name, entry in raw_data.items():
        if not isinstance(name, str) or not isinstance(entry, Mapping):
            continue
        try:
            preset = SweepPreset.from_mapping(entry, valid_modes=KEEP_MODES)
        except ValueError as exc:
            logger.warning(f"Skipping preset '{name}': {exc}")
            continue
        problem = preset_out_of_bounds(preset)
        if problem is not None:
            logger.warning(f"Skipping preset '{name}': {problem}")
            continue
        presets[name] = preset

    return presets
