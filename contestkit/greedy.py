"""Greedy solutions: contrast compression, matching, horde fighting and splitting."""

from __future__ import annotations

from collections.abc import Sequence


def min_contrast_length(a: Sequence[int]) -> int:
    """Length of the shortest subsequence of ``a`` keeping the same total contrast.

    That is the number of direction changes plus one, with equal neighbours merged.
    """
    if not a:
        raise ValueError("sequence must not be empty")
    direction: bool | None = None  # True rising, False falling
    length = 1
    previous = a[0]
    for value in a[1:]:
        if value != previous:
            rising = value > previous
            if direction is None or rising != direction:
                direction = rising
                length += 1
        previous = value
    return length


def count_unmatched(a: Sequence[int], b: Sequence[int]) -> int:
    """Count elements of ``b`` left without a strictly smaller partner from ``a`` plus a 1.

    ``a`` must hold exactly one element fewer than ``b``.
    """
    if len(a) != len(b) - 1:
        raise ValueError("a must have exactly one element fewer than b")
    smaller = sorted([1, *a])
    larger = sorted(b)
    used = 0
    unmatched = 0
    for value in larger:
        if smaller[used] < value:
            used += 1
        else:
            unmatched += 1
    return unmatched


def min_attacks(hordes: Sequence[int]) -> int:
    """Fewest attacks to clear every horde using single hits and combo-ending ultimates."""
    if not hordes:
        raise ValueError("there must be at least one horde")
    sizes = sorted(hordes)
    i, j = 0, len(sizes) - 1
    combo = 0
    attacks = 0
    while i < j:
        if sizes[i] + combo < sizes[j]:
            attacks += sizes[i]
            combo += sizes[i]
            i += 1
        else:
            needed = sizes[j] - combo
            attacks += needed + 1
            sizes[i] -= needed
            j -= 1
            combo = 0
    last = sizes[i]
    if last != 0:
        hits = max(0, (last - combo + 1) // 2)
        attacks += hits + (0 if last - hits == 0 else 1)
    return attacks


def min_operations(n: int, k: int) -> int:
    """Fewest operations to reduce ``n`` to zero removing up to ``k`` at a time, odd first."""
    if k < 2:
        raise ValueError("k must be at least 2")
    operations = 0
    if n % 2 == 1:
        n -= min(n, k)
        operations += 1
    step = k - 1
    quotient, remainder = divmod(n, step)
    operations += quotient
    if remainder:
        operations += 1
    return operations