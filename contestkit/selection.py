"""Selection solutions: difference operations, activity days and painted sums."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from itertools import combinations, permutations


def min_after_operations(a: Sequence[int], k: int) -> int:
    """Smallest value reachable after ``k`` operations appending ``|a_i - a_j|``."""
    if not a:
        raise ValueError("sequence must not be empty")
    if k < 0:
        raise ValueError("k must be non-negative")
    if k >= 3:
        return 0
    values = sorted(a)
    best = values[0]
    if k == 0:
        return best
    for left, right in combinations(values, 2):
        diff = abs(left - right)
        best = min(best, diff)
        if k == 2:
            pos = bisect_right(values, diff)
            if pos < len(values):
                best = min(best, abs(diff - values[pos]))
            if pos > 0:
                best = min(best, abs(diff - values[pos - 1]))
    return best


def top_three(values: Sequence[int]) -> list[tuple[int, int]]:
    """Three large ``(value, index)`` pairs, ascending.

    Starting from the first three, each later value replaces the smallest kept
    pair when it is strictly larger.
    """
    if len(values) < 3:
        raise ValueError("at least three values are needed")
    kept = sorted((value, i) for i, value in enumerate(values[:3]))
    for i, value in enumerate(values[3:], start=3):
        if value > kept[0][0]:
            kept[0] = (value, i)
            kept.sort()
    return kept


def best_activity_sum(a: Sequence[int], b: Sequence[int], c: Sequence[int]) -> int:
    """Largest ``a[x] + b[y] + c[z]`` over three distinct days ``x``, ``y``, ``z``."""
    if not len(a) == len(b) == len(c):
        raise ValueError("a, b and c must have the same length")
    days = sorted({index for values in (a, b, c) for _, index in top_three(values)})
    return max(a[x] + b[y] + c[z] for x, y, z in permutations(days, 3))


def max_painted_sum(a: Sequence[int], k: int) -> int:
    """Largest sum of painted cells reachable after painting ``k`` cells of ``a``."""
    n = len(a)
    if k < 1 or k + 1 > n:
        raise ValueError("k must be between 1 and len(a) - 1")
    ranked = sorted((value, i) for i, value in enumerate(a))
    largest = ranked[-1][1]
    second = ranked[-2][1]
    if (
        k == 1
        and n > 3
        and ((largest == 0 and second == 1) or (second == n - 2 and largest == n - 1))
    ):
        return ranked[-1][0] + ranked[-3][0]
    return sum(value for value, _ in ranked[n - k - 1 :])