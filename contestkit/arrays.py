"""Array solutions: tea tasting, triple beauty, plank stepping, minima recovery and coins."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections.abc import Sequence
from itertools import accumulate, groupby
from math import isqrt


def tea_consumption(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Amount of tea each taster drinks.

    Tea ``i`` holds ``a[i]`` and is tasted in turn by tasters ``i, i + 1, ...``,
    taster ``j`` drinking up to ``b[j]`` of it per step.
    """
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    n = len(a)
    prefix = list(accumulate(b))
    active = [0] * (n + 1)
    partial = [0] * (n + 1)
    for i, amount in enumerate(a):
        reach = amount + (prefix[i - 1] if i else 0)
        last = bisect_left(prefix, reach)
        active[i] += 1
        active[last] -= 1
        partial[last] += reach - (prefix[last - 1] if last else 0)
    full = accumulate(active)
    return [count * capacity + extra for count, capacity, extra in zip(full, b, partial)]


def max_triple_beauty(a: Sequence[int]) -> int:
    """Largest ``a[l] + a[m] + a[r] - (r - l)`` over ``l < m < r``, floored at zero."""
    n = len(a)
    if n < 3:
        return 0
    left_best = list(accumulate((value + j + 1 for j, value in enumerate(a)), max))
    right_values = [value - (j + 1) for j, value in enumerate(a)]
    right_best = list(accumulate(reversed(right_values), max))[::-1]
    best = max(a[m] + left_best[m - 1] + right_best[m + 1] for m in range(1, n - 1))
    return max(best, 0)


def min_max_step(k: int, colors: Sequence[int]) -> int:
    """Smallest possible longest step across the planks after repainting one plank.

    Colours run from 1 to ``k``; the walk keeps to a single colour.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    n = len(colors)
    last = [0] * (k + 1)
    gaps: list[list[int]] = [[] for _ in range(k + 1)]
    for t, color in enumerate(colors, start=1):
        if not 1 <= color <= k:
            raise ValueError(f"colour {color} is outside 1..{k}")
        gaps[color].append(t - last[color] - 1)
        last[color] = t
    best: int | None = None
    for color in range(1, k + 1):
        largest, *rest = heapq.nlargest(2, [*gaps[color], n - last[color]])
        step = max(largest // 2, rest[0]) if rest else largest // 2
        if best is None or step < best:
            best = step
    assert best is not None
    return best


def recover_array(n: int, minima: Sequence[int]) -> list[int]:
    """Rebuild an array of length ``n`` from the minima of all its pairs, largest first."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if len(minima) != n * (n - 1) // 2:
        raise ValueError("expected n * (n - 1) / 2 pairwise minima")
    result: list[int] = []
    placed = 0
    for value, group in groupby(sorted(minima, reverse=True)):
        count = sum(1 for _ in group)
        root = isqrt((2 * placed - 1) ** 2 + 8 * count)
        copies = (1 - 2 * placed + root) // 2
        if copies * (copies - 1) // 2 + placed * copies != count:
            raise ValueError("minima do not come from any array")
        result.extend([value] * copies)
        placed += copies
    return result


def max_pairwise_difference(a: Sequence[int]) -> int:
    """Largest absolute difference between two elements of ``a``."""
    if len(a) < 2:
        raise ValueError("at least two elements are needed")
    return max(a) - min(a)


def max_largest_coin(a: Sequence[int]) -> int:
    """Largest single pile reachable by moving coins between piles of odd total."""
    if not a:
        raise ValueError("sequence must not be empty")
    odd_count = sum(1 for value in a if value % 2)
    if odd_count == 0 or odd_count == len(a):
        return max(a)
    return sum(a) - odd_count + 1