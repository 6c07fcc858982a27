"""Combination counts and zero-hit hypergeometric ratios.

Both helpers work with running products of small ratios instead of
factorials, so every partial result stays bounded for the deck sizes used
by the calculator.
"""

from __future__ import annotations

import math


def combination(n: float, k: float) -> float:
    """Return C(n, k) as a float.

    Parameters
    ----------
    n, k:
        Arguments are floored to integers. Non-finite values, ``k < 0`` and
        ``k > n`` all give ``0.0``.
    """

    if not math.isfinite(n) or not math.isfinite(k):
        return 0.0
    n = math.floor(n)
    k = math.floor(k)
    if k < 0 or k > n:
        return 0.0

    k_eff = min(k, n - k)
    if k_eff == 0:
        return 1.0

    result = 1.0
    for i in range(1, k_eff + 1):
        result *= (n - k_eff + i) / i
    return result


def zero_hit_ratio(total: int, target_in_deck: int, draws: int) -> float:
    """Return the probability of drawing no target card.

    Equivalent to ``C(total - target_in_deck, draws) / C(total, draws)`` for
    ``draws`` cards taken without replacement from a deck of ``total`` cards
    holding ``target_in_deck`` targets.

    Parameters
    ----------
    total:
        Number of cards in the deck.
    target_in_deck:
        Number of target cards among them.
    draws:
        Number of cards drawn.

    Returns
    -------
    float
        Probability on ``[0, 1]``. Drawing nothing, a deck without targets and
        an empty deck all count as a certain miss (``1.0``); drawing more cards
        than the deck holds counts as a certain hit (``0.0``).
    """

    if draws <= 0:
        return 1.0
    if target_in_deck <= 0:
        return 1.0
    if total <= 0:
        return 1.0
    if draws > total:
        return 0.0
    non_targets = total - target_in_deck
    if non_targets < 0:
        return 0.0

    product = 1.0
    for i in range(draws):
        numerator = non_targets - i
        if numerator <= 0:
            # Ran out of non-targets: the remaining draws must hit.
            return 0.0
        product *= numerator / (total - i)
    return product
