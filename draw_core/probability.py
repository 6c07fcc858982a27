"""Closed-form probabilities of drawing at least one target card."""

from __future__ import annotations

import math

from .combinatorics import combination, zero_hit_ratio
from .constants import (
    DECK_SIZE,
    KEEP,
    KEEP_MODES,
    MAX_DRAW_COUNT,
    MAX_MULLIGAN_COUNT,
    MAX_REDRAW_COUNT,
    MAX_TARGET_COUNT,
    OPENING_HAND_SIZE,
    POST_HAND_DECK_SIZE,
    KeepMode,
)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``."""

    return max(lower, min(upper, value))


def clamp_count(value: float, upper: int) -> int:
    """Floor a card count and clamp it into ``[0, upper]``.

    NaN and negative infinity map to ``0``; positive infinity maps to ``upper``.
    """

    if math.isnan(value):
        return 0
    if math.isinf(value):
        return upper if value > 0 else 0
    return int(clamp(math.floor(value), 0, upper))


def probability_at_least_one(
    keep_mode: KeepMode,
    targets_in_deck: float,
    mulligan_count: float,
    draws_from_deck: float,
) -> float:
    """Return the probability of seeing at least one target card.

    Parameters
    ----------
    keep_mode:
        ``"keep"`` when the opening hand is kept as dealt, ``"no_keep"`` when
        it goes back into the deck before the mulligan.
    targets_in_deck:
        Copies of the target card in the 40-card deck (``n``).
    mulligan_count:
        Cards redrawn during the mulligan (``l``).
    draws_from_deck:
        Cards drawn after the game starts (``m``).

    Raises
    ------
    ValueError
        If ``keep_mode`` is not one of ``KEEP_MODES``.
    """

    if keep_mode not in KEEP_MODES:
        raise ValueError(f"Unknown keep mode '{keep_mode}'")

    n = clamp_count(targets_in_deck, MAX_TARGET_COUNT)
    redraws = clamp_count(mulligan_count, MAX_MULLIGAN_COUNT)
    m = clamp_count(draws_from_deck, MAX_DRAW_COUNT)

    if keep_mode == KEEP:
        p_no_initial = zero_hit_ratio(DECK_SIZE, n, OPENING_HAND_SIZE)
        p_no_mulligan = zero_hit_ratio(POST_HAND_DECK_SIZE, n, redraws)
        p_no_draws = zero_hit_ratio(POST_HAND_DECK_SIZE, n, m)
        p_miss = p_no_initial * p_no_mulligan * p_no_draws
        return clamp(1.0 - p_miss, 0.0, 1.0)

    # P(miss) = Q_m * sum_k P_l(k) * Q_l(k), with the returned hand reshuffled
    # into a (36 + l)-card universe for the mulligan draw.
    q_m = zero_hit_ratio(POST_HAND_DECK_SIZE, n, m)
    universe = POST_HAND_DECK_SIZE + redraws
    denominator = combination(universe, redraws)
    total = 0.0
    for k in range(min(redraws, n) + 1):
        if denominator == 0:
            p_l = 0.0
        else:
            p_l = combination(n, k) * combination(universe - n, redraws - k) / denominator
        q_l = zero_hit_ratio(POST_HAND_DECK_SIZE, n - k, redraws)
        total += p_l * q_l
    p_miss = q_m * total
    return clamp(1.0 - p_miss, 0.0, 1.0)


def probability_at_least_one_keep(
    targets_in_deck: float,
    redraw_count: float,
    draws_from_deck: float,
) -> float:
    """Return the hit probability given that the kept opening hand already missed.

    Only the redraws from the 36-card deck and the later draws are modelled;
    ``redraw_count`` is clamped to the opening hand size.
    """

    n = clamp_count(targets_in_deck, MAX_TARGET_COUNT)
    redraws = clamp_count(redraw_count, MAX_REDRAW_COUNT)
    m = clamp_count(draws_from_deck, MAX_DRAW_COUNT)

    p_no_mulligan = zero_hit_ratio(POST_HAND_DECK_SIZE, n, redraws)
    p_no_draws = zero_hit_ratio(POST_HAND_DECK_SIZE, n, m)
    return clamp(1.0 - p_no_mulligan * p_no_draws, 0.0, 1.0)
