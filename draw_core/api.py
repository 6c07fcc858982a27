"""High-level entry points used by the UI and callers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from time import perf_counter
from typing import Optional

import numpy as np
from loguru import logger

from .constants import KEEP, KEEP_MODES, KeepMode
from .data import UI_MULLIGAN_CHOICES
from .models import ProbabilityTable, SweepRange
from .probability import probability_at_least_one, probability_at_least_one_keep

ProbabilityModel = Callable[[KeepMode, int, int, int], float]


class MemoizedModel:
    """Call-site cache around a probability model.

    Results are keyed by ``(keep_mode, n, l, m)``. The wrapped model stays
    pure; the cache belongs to whoever builds this object.
    """

    def __init__(self, model: Optional[ProbabilityModel] = None) -> None:
        self._model = model if model is not None else probability_at_least_one
        self._cache: dict[tuple[KeepMode, int, int, int], float] = {}
        self.hits = 0
        self.misses = 0

    def __call__(self, keep_mode: KeepMode, n: int, l: int, m: int) -> float:  # noqa: E741
        key = (keep_mode, n, l, m)
        try:
            value = self._cache[key]
        except KeyError:
            self.misses += 1
            value = self._model(keep_mode, n, l, m)
            self._cache[key] = value
        else:
            self.hits += 1
        return value

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        """Drop all cached results and reset the counters."""

        self._cache.clear()
        self.hits = 0
        self.misses = 0


def restricted_keep_model(keep_mode: KeepMode, n: int, l: int, m: int) -> float:  # noqa: E741
    """Adapt the restricted keep-only model to the general model signature."""

    del keep_mode
    return probability_at_least_one_keep(n, l, m)


def _fill_table(
    rows: list[int],
    columns: list[int],
    cell: Callable[[int, int], float],
) -> np.ndarray:
    grid = np.zeros((len(rows), len(columns)), dtype=float)
    for r_idx, row in enumerate(rows):
        for c_idx, column in enumerate(columns):
            grid[r_idx, c_idx] = cell(row, column)
    return grid


def build_target_sweep(
    keep_mode: KeepMode,
    mulligan_count: int,
    target_range: SweepRange,
    draw_range: SweepRange,
    model: Optional[ProbabilityModel] = None,
) -> ProbabilityTable:
    """Evaluate the general model for every ``(n, m)`` pair.

    Parameters
    ----------
    keep_mode:
        Opening-hand policy forwarded to the model.
    mulligan_count:
        Cards redrawn during the mulligan (``l``), fixed across the sweep.
    target_range:
        Inclusive range of target counts ``n``; one table row per value.
    draw_range:
        Inclusive range of later draws ``m``; one table column per value.
    model:
        Optional replacement for ``probability_at_least_one``, typically a
        ``MemoizedModel``.

    Raises
    ------
    ValueError
        If ``keep_mode`` is unknown.
    """

    if keep_mode not in KEEP_MODES:
        raise ValueError(f"Unknown keep mode '{keep_mode}'")
    active_model = model if model is not None else probability_at_least_one

    rows = target_range.values()
    columns = draw_range.values()
    compute_start = perf_counter()
    grid = _fill_table(
        rows,
        columns,
        lambda n, m: active_model(keep_mode, n, mulligan_count, m),
    )
    compute_seconds = perf_counter() - compute_start
    logger.debug(
        f"Target sweep {keep_mode} l={mulligan_count} "
        f"n={target_range.as_tuple()} m={draw_range.as_tuple()} "
        f"took {compute_seconds * 1000:.2f} ms"
    )
    return ProbabilityTable(
        row_label="n",
        column_label="m",
        row_values=rows,
        column_values=columns,
        probabilities=grid,
        compute_seconds=compute_seconds,
    )


def build_mulligan_sweep(
    target_count: int,
    draw_range: SweepRange,
    mulligan_counts: Iterable[int] = UI_MULLIGAN_CHOICES,
    model: Optional[ProbabilityModel] = None,
) -> ProbabilityTable:
    """Evaluate the restricted keep-only model for every ``(l, m)`` pair.

    The opening hand is assumed to have missed already, so each row shows
    how redrawing ``l`` cards changes the odds over the later draws.
    ``model`` receives ``KEEP`` as its policy argument.
    """

    active_model = model if model is not None else restricted_keep_model
    rows = sorted(set(int(count) for count in mulligan_counts))
    columns = draw_range.values()

    compute_start = perf_counter()
    grid = _fill_table(
        rows,
        columns,
        lambda l, m: active_model(KEEP, target_count, l, m),  # noqa: E741
    )
    compute_seconds = perf_counter() - compute_start
    logger.debug(
        f"Mulligan sweep n={target_count} l={rows} m={draw_range.as_tuple()} "
        f"took {compute_seconds * 1000:.2f} ms"
    )
    return ProbabilityTable(
        row_label="l",
        column_label="m",
        row_values=rows,
        column_values=columns,
        probabilities=grid,
        compute_seconds=compute_seconds,
    )
