"""Tests for domain constants and sweep preset loading."""

import json
from pathlib import Path

import pytest

from draw_core.constants import (
    DECK_SIZE,
    KEEP,
    KEEP_MODES,
    NO_KEEP,
    OPENING_HAND_SIZE,
    POST_HAND_DECK_SIZE,
)
from draw_core.data import (
    SWEEP_PRESETS_FILENAME,
    UI_DRAW_RANGE,
    UI_TARGET_RANGE,
    load_sweep_presets,
    preset_out_of_bounds,
)
from draw_core.models import SweepPreset, SweepRange

SHIPPED_PRESETS = Path(__file__).resolve().parents[1] / "streamlit_UI" / SWEEP_PRESETS_FILENAME


class TestConstants:
    def test_deck_sizes(self) -> None:
        assert DECK_SIZE == 40
        assert OPENING_HAND_SIZE == 4
        assert POST_HAND_DECK_SIZE == 36


class TestSweepPreset:
    """Tests for SweepPreset.from_mapping."""

    def test_valid_entry(self) -> None:
        preset = SweepPreset.from_mapping(
            {"keep_mode": NO_KEEP, "mulligan_count": 2, "target_range": [6, 1], "draw_range": [0, 9]},
            valid_modes=KEEP_MODES,
        )
        assert preset.keep_mode == NO_KEEP
        assert preset.mulligan_count == 2
        assert preset.target_range == SweepRange(6, 1)
        assert preset.target_range.as_tuple() == (1, 6)

    def test_keep_mode_defaults_to_known_modes(self) -> None:
        """Without explicit modes the keep-mode tags are validated."""
        preset = SweepPreset.from_mapping(
            {"keep_mode": KEEP, "target_range": [3, 3], "draw_range": [1, 9]}
        )
        assert preset.keep_mode == KEEP
        assert preset.mulligan_count == 0
        assert SweepPreset.__annotations__["keep_mode"] == "KeepMode"

    def test_unknown_mode_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown keep mode"):
            SweepPreset.from_mapping(
                {"keep_mode": "maybe", "target_range": [1, 2], "draw_range": [1, 2]},
                valid_modes=KEEP_MODES,
            )

    def test_bad_range_raises(self) -> None:
        with pytest.raises(ValueError, match="target_range"):
            SweepPreset.from_mapping(
                {"keep_mode": KEEP, "target_range": [1], "draw_range": [1, 2]},
                valid_modes=KEEP_MODES,
            )

    def test_non_integer_range_raises(self) -> None:
        with pytest.raises(ValueError, match="draw_range bounds must be integers"):
            SweepPreset.from_mapping(
                {"keep_mode": KEEP, "target_range": [1, 2], "draw_range": ["a", 2]},
                valid_modes=KEEP_MODES,
            )


class TestLoadSweepPresets:
    """Tests for load_sweep_presets."""

    def test_no_path(self) -> None:
        assert load_sweep_presets(None) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_sweep_presets(tmp_path / "missing.json") == {}

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_sweep_presets(path) == {}

    def test_top_level_list_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.json"
        path.write_text("[]", encoding="utf-8")
        assert load_sweep_presets(path) == {}

    def test_skips_invalid_entries(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.json"
        path.write_text(
            json.dumps(
                {
                    "good": {
                        "keep_mode": KEEP,
                        "mulligan_count": 1,
                        "target_range": [3, 3],
                        "draw_range": [1, 9],
                    },
                    "bad mode": {"keep_mode": "x", "target_range": [3, 3], "draw_range": [1, 9]},
                    "not an object": 5,
                },
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )
        presets = load_sweep_presets(path)
        assert list(presets) == ["good"]
        assert presets["good"].draw_range.values() == list(range(1, 10))

    def test_shipped_presets_load(self) -> None:
        presets = load_sweep_presets(SHIPPED_PRESETS)
        assert len(presets) == 3
        assert all(preset.keep_mode in KEEP_MODES for preset in presets.values())

    def test_skips_presets_outside_widget_bounds(self, tmp_path: Path) -> None:
        """Entries the sliders and selectboxes cannot display are dropped, not loaded."""
        path = tmp_path / "presets.json"
        path.write_text(
            json.dumps(
                {
                    "fits": {
                        "keep_mode": KEEP,
                        "mulligan_count": 4,
                        "target_range": [0, 20],
                        "draw_range": [0, 40],
                    },
                    "wide": {
                        "keep_mode": KEEP,
                        "mulligan_count": 7,
                        "target_range": [3, 30],
                        "draw_range": [1, 9],
                    },
                    "too many targets": {
                        "keep_mode": KEEP,
                        "mulligan_count": 0,
                        "target_range": [3, 30],
                        "draw_range": [1, 9],
                    },
                    "too many draws": {
                        "keep_mode": NO_KEEP,
                        "mulligan_count": 1,
                        "target_range": [3, 3],
                        "draw_range": [1, 41],
                    },
                    "negative draws": {
                        "keep_mode": NO_KEEP,
                        "mulligan_count": 1,
                        "target_range": [3, 3],
                        "draw_range": [-1, 5],
                    },
                },
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )
        presets = load_sweep_presets(path)
        assert list(presets) == ["fits"]


class TestPresetOutOfBounds:
    """Tests for preset_out_of_bounds."""

    def _preset(self, mulligan_count: int, target: list[int], draws: list[int]) -> SweepPreset:
        return SweepPreset.from_mapping(
            {
                "keep_mode": KEEP,
                "mulligan_count": mulligan_count,
                "target_range": target,
                "draw_range": draws,
            }
        )

    def test_within_bounds(self) -> None:
        preset = self._preset(2, [UI_TARGET_RANGE[1], 1], list(UI_DRAW_RANGE))
        assert preset_out_of_bounds(preset) is None

    def test_mulligan_count_outside_choices(self) -> None:
        assert "mulligan_count" in preset_out_of_bounds(self._preset(7, [3, 3], [1, 9]))

    def test_target_range_above_slider(self) -> None:
        assert "target_range" in preset_out_of_bounds(self._preset(0, [3, 30], [1, 9]))

    def test_draw_range_above_slider(self) -> None:
        assert "draw_range" in preset_out_of_bounds(self._preset(0, [3, 3], [1, 41]))
