"""Range-query solutions: bitwise-AND reach and the largest shared modulus."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import gcd

_BITS = 30


class GcdSegmentTree:
    """Zero-indexed segment tree over non-negative integers combined by gcd.

    Zero is the neutral value. Query ranges include ``begin`` and exclude ``end``.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._nodes = [0] * (2 * n)

    def update(self, pos: int, value: int) -> None:
        """Set position ``pos`` to ``value``."""
        if not 0 <= pos < self.n:
            raise IndexError(f"position {pos} is outside 0..{self.n - 1}")
        if value < 0:
            raise ValueError("values must be non-negative")
        pos += self.n
        self._nodes[pos] = value
        while pos > 1:
            pos //= 2
            self._nodes[pos] = gcd(self._nodes[2 * pos], self._nodes[2 * pos + 1])

    def query(self, begin: int, end: int) -> int:
        """Gcd of positions ``begin`` up to but not including ``end``; 0 when empty."""
        if not 0 <= begin <= end <= self.n:
            raise IndexError(f"range [{begin}, {end}) is outside 0..{self.n}")
        left = right = 0
        begin += self.n
        end += self.n
        while begin < end:
            if begin % 2:
                left = gcd(left, self._nodes[begin])
                begin += 1
            if end % 2:
                end -= 1
                right = gcd(self._nodes[end], right)
            begin //= 2
            end //= 2
        return gcd(left, right)


def max_and_reach(a: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """For each 1-based query ``(l, k)``, the largest ``r`` with ``a[l] & ... & a[r] >= k``.

    The answer is -1 when even ``a[l]`` alone falls short of ``k``. Only the lowest
    30 bits of each value count.
    """
    n = len(a)
    unbounded = n + 1
    # runs[i][j]: how many consecutive values from i on have bit j set.
    runs: list[list[int]] = [[0] * _BITS for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        following = runs[i + 1]
        runs[i] = [following[j] + 1 if a[i] >> j & 1 else 0 for j in range(_BITS)]

    def reach(start: int, bit: int, k: int) -> int:
        if k == 0:
            return unbounded
        if bit < 0 or (1 << (bit + 1)) <= k:
            return -1
        run = runs[start][bit]
        if not run:
            return reach(start, bit - 1, k)
        best = run if (1 << bit) > k else -1
        best = max(best, min(run, reach(start, bit - 1, k - (1 << bit))))
        return max(best, reach(start, bit - 1, k))

    answers: list[int] = []
    for l, k in queries:
        if not 1 <= l <= n:
            raise ValueError(f"query start {l} is outside 1..{n}")
        if k < 1:
            raise ValueError("k must be at least 1")
        length = reach(l - 1, _BITS - 1, k)
        answers.append(-1 if length == -1 else length + l - 1)
    return answers


def max_modulus(a: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """For each 1-based range ``(l, r)``, the largest ``m`` making ``a[l..r]`` equal modulo ``m``.

    The answer is 0 when any modulus will do.
    """
    n = len(a)
    tree = GcdSegmentTree(max(n - 1, 0))
    for i, (previous, current) in enumerate(zip(a, a[1:])):
        tree.update(i, abs(current - previous))
    answers: list[int] = []
    for l, r in queries:
        if not 1 <= l <= r <= n:
            raise ValueError(f"range ({l}, {r}) is outside 1..{n}")
        answers.append(0 if l == r else tree.query(l - 1, r - 1))
    return answers