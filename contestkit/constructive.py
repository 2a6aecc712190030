"""Constructive solutions: MEX removal plans and prefix-flag consistency."""

from __future__ import annotations

from collections.abc import Sequence


def removal_operations(a: Sequence[int]) -> list[tuple[int, int]]:
    """Operations that shrink ``a`` to a single zero.

    Each operation ``(l, r)`` is 1-based and inclusive. It replaces the current
    ``a[l..r]`` by its MEX. First every zero is merged with a neighbour, which
    leaves no zeros. A last operation over the whole array then yields 0.
    """
    n = len(a)
    if n < 2:
        raise ValueError("the array must hold at least two elements")
    operations: list[tuple[int, int]] = []
    removed = 0
    i = 0
    while i < n:
        if a[i] != 0:
            i += 1
            continue
        if i == n - 1:
            operations.append((i - removed, i + 1 - removed))
            removed += 1
            break
        operations.append((i + 1 - removed, i + 2 - removed))
        removed += 1
        i += 2
    operations.append((1, n - removed))
    return operations


def is_consistent(flags: Sequence[int]) -> bool:
    """Whether the neighbour-equality flags can describe a real array.

    The flags cannot when a 0 sits between two 1s.
    """
    return not any(
        window == (1, 0, 1) for window in zip(flags, flags[1:], flags[2:])
    )