"""Draw probability model for Shadowverse: Worlds Beyond opening hands."""

from .api import (
    MemoizedModel,
    ProbabilityModel,
    build_mulligan_sweep,
    build_target_sweep,
    restricted_keep_model,
)
from .charts import (
    build_probability_chart,
    color_for_mulligan_count,
    color_for_target_count,
    format_probability,
    format_probability_frame,
    redraw_header,
    table_to_long_frame,
)
from .combinatorics import combination, zero_hit_ratio
from .constants import (
    DECK_SIZE,
    KEEP,
    KEEP_MODES,
    NO_KEEP,
    OPENING_HAND_SIZE,
    POST_HAND_DECK_SIZE,
    KeepMode,
)
from .data import (
    DEFAULT_DRAW_RANGE,
    DEFAULT_KEEP_MODE,
    DEFAULT_MULLIGAN_COUNT,
    DEFAULT_SEARCH_DRAW_RANGE,
    DEFAULT_SEARCH_TARGET_COUNT,
    DEFAULT_TARGET_RANGE,
    KEEP_MODE_LABELS,
    SWEEP_PRESETS_FILENAME,
    UI_DRAW_RANGE,
    UI_MULLIGAN_CHOICES,
    UI_TARGET_RANGE,
    load_sweep_presets,
    preset_out_of_bounds,
)
from .models import ProbabilityTable, SweepPreset, SweepRange
from .probability import (
    clamp,
    clamp_count,
    probability_at_least_one,
    probability_at_least_one_keep,
)

__all__ = [
    "DECK_SIZE",
    "DEFAULT_DRAW_RANGE",
    "DEFAULT_KEEP_MODE",
    "DEFAULT_MULLIGAN_COUNT",
    "DEFAULT_SEARCH_DRAW_RANGE",
    "DEFAULT_SEARCH_TARGET_COUNT",
    "DEFAULT_TARGET_RANGE",
    "KEEP",
    "KEEP_MODE_LABELS",
    "KEEP_MODES",
    "NO_KEEP",
    "OPENING_HAND_SIZE",
    "POST_HAND_DECK_SIZE",
    "SWEEP_PRESETS_FILENAME",
    "UI_DRAW_RANGE",
    "UI_MULLIGAN_CHOICES",
    "UI_TARGET_RANGE",
    "KeepMode",
    "MemoizedModel",
    "ProbabilityModel",
    "ProbabilityTable",
    "SweepPreset",
    "SweepRange",
    "build_mulligan_sweep",
    "build_probability_chart",
    "build_target_sweep",
    "clamp",
    "clamp_count",
    "color_for_mulligan_count",
    "color_for_target_count",
    "combination",
    "format_probability",
    "format_probability_frame",
    "load_sweep_presets",
    "preset_out_of_bounds",
    "probability_at_least_one",
    "probability_at_least_one_keep",
    "redraw_header",
    "restricted_keep_model",
    "table_to_long_frame",
    "zero_hit_ratio",
]
