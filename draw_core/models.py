"""Dataclasses shared across the sweep driver and the UI."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np
import pandas as pd

from .constants import KEEP_MODES, KeepMode


@dataclass(frozen=True)
class SweepRange:
    """Inclusive integer range selected by a range slider.

    The bounds may arrive in either order; ``values`` always ascends.
    """

    lower: int
    upper: int

    @property
    def start(self) -> int:
        return min(self.lower, self.upper)

    @property
    def stop(self) -> int:
        return max(self.lower, self.upper)

    def values(self) -> list[int]:
        return list(range(self.start, self.stop + 1))

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.stop)


@dataclass
class ProbabilityTable:
    """Probability surface produced by a parameter sweep."""

    row_label: str
    column_label: str
    row_values: list[int]
    column_values: list[int]
    probabilities: np.ndarray
    compute_seconds: float = 0.0

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self.row_values), len(self.column_values))

    def row(self, value: int) -> list[float]:
        """Return the probabilities of the row keyed by ``value``."""

        index = self.row_values.index(value)
        return [float(p) for p in self.probabilities[index]]

    def to_frame(self) -> pd.DataFrame:
        """Return the table as a DataFrame indexed by row value."""

        frame = pd.DataFrame(
            self.probabilities,
            index=pd.Index(self.row_values, name=self.row_label),
            columns=pd.Index(self.column_values, name=self.column_label),
        )
        return frame


@dataclass(frozen=True)
class SweepPreset:
    """Named set of default inputs for the main calculator page."""

    keep_mode: KeepMode
    mulligan_count: int
    target_range: SweepRange
    draw_range: SweepRange

    @classmethod
    def from_mapping(
        cls,
        entry: Mapping[str, object],
        valid_modes: Iterable[KeepMode] = KEEP_MODES,
    ) -> "SweepPreset":
        """Build a preset from a JSON object.

        Raises
        ------
        ValueError
            If the keep mode is unknown or a count/range is malformed.
        """

        modes = tuple(valid_modes)
        raw_mode = entry.get("keep_mode")
        if raw_mode not in modes:
            raise ValueError(f"Unknown keep mode '{raw_mode}'")
        keep_mode = next(mode for mode in modes if mode == raw_mode)

        try:
            mulligan_count = int(entry.get("mulligan_count", 0))  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid mulligan count {entry.get('mulligan_count')!r}") from exc

        return cls(
            keep_mode=keep_mode,
            mulligan_count=mulligan_count,
            target_range=_parse_range(entry.get("target_range"), "target_range"),
            draw_range=_parse_range(entry.get("draw_range"), "draw_range"),
        )


def _parse_range(raw: object, field: str) -> SweepRange:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{field} must be a two-element list, got {raw!r}")
    try:
        lower, upper = (int(bound) for bound in raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field} bounds must be integers, got {raw!r}") from exc
    return SweepRange(lower, upper)
