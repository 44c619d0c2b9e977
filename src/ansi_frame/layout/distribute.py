"""Integer space distribution."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Sequence


def distribute(total: int, weights: Sequence[float]) -> list[int]:
    """
    Split ``total`` cells across ``weights`` with largest-remainder rounding.

    Every share gets the floor of its exact quota; the cells left over go,
    one each, to the shares with the largest fractional parts (earlier
    index wins ties). The result always sums to ``total`` when any weight
    is positive. Quotas are computed with exact fractions.

    Args:
        total: Cells to distribute. Values <= 0 yield all zeros.
        weights: Relative weights. Non-positive weights receive nothing.

    Returns:
        One share per weight.
    """
    shares = [0] * len(weights)
    positive = [Fraction(w) if w > 0 else Fraction(0) for w in weights]
    weight_sum = sum(positive, Fraction(0))
    if total <= 0 or weight_sum <= 0:
        return shares

    remainders: list[tuple[Fraction, int]] = []
    for i, weight in enumerate(positive):
        exact = total * weight / weight_sum
        shares[i] = math.floor(exact)
        if weight > 0:
            remainders.append((exact - shares[i], i))

    leftover = total - sum(shares)
    remainders.sort(key=lambda item: (-item[0], item[1]))
    for _, i in remainders[:leftover]:
        shares[i] += 1
    return shares
