"""Dynamic-programming solutions: subset counting, boss fights, block deletion and more."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

MOD = 998244353


def knapsack_counts(k: int, queries: Iterable[tuple[str, int]]) -> list[int]:
    """Count subsets summing to ``k`` after each add ("+") or remove ("-") of a ball.

    Every count is taken modulo 998244353.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    ways = [1] + [0] * k
    results: list[int] = []
    for op, r in queries:
        if op == "+":
            for i in range(k, r - 1, -1):
                ways[i] = (ways[i] + ways[i - r]) % MOD
        elif op == "-":
            for i in range(max(r, 0), k + 1):
                ways[i] = (ways[i] - ways[i - r]) % MOD
        else:
            raise ValueError(f"unknown operation {op!r}")
        results.append(ways[k])
    return results


def min_skip_points(bosses: Sequence[int]) -> int:
    """Fewest skip points the friend spends when bosses are fought in turns of one or two.

    ``bosses`` holds 1 for a hard boss and 0 for an easy one; the friend moves first
    and pays one point per hard boss he kills.
    """
    n = len(bosses)
    # cost[turn][m]: best cost from boss m onwards, turn 1 being the friend's.
    cost = [[0] * (n + 2) for _ in range(2)]
    for m in range(n - 1, -1, -1):
        for turn in (0, 1):
            single = bosses[m] * turn + cost[1 - turn][m + 1]
            if m == n - 1:
                cost[turn][m] = bosses[m] * turn
            else:
                double = (bosses[m] + bosses[m + 1]) * turn + cost[1 - turn][m + 2]
                cost[turn][m] = min(single, double)
    return cost[1][0]


def min_deletions_to_blocks(a: Sequence[int]) -> int:
    """Fewest deletions turning ``a`` into blocks, each a length header followed by that many items."""
    n = len(a)
    best = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        end = i + 1 + a[i]
        if end > n:
            best[i] = best[i + 1] + 1
        else:
            best[i] = min(best[end], 1 + best[i + 1])
    return best[0]


def min_split_penalty(a: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence of ``a``, less two, floored at zero."""
    tails: list[int] = []
    for value in a:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return max(len(tails), 2) - 2


def count_beautiful_subsequences(a: Sequence[int]) -> int:
    """Count subsequences of the form 1, 2, ..., 2, 3 (at least one 2), modulo 998244353.

    Values other than 1 and 2 act as 3.
    """
    ones: list[list[int]] = []  # [twos seen before this run of ones, size of run]
    twos = 0
    pending_threes = 0
    total = 0
    n = len(a)
    for i, value in enumerate(a):
        if value == 1:
            if ones and ones[-1][0] == twos:
                ones[-1][1] += 1
            else:
                ones.append([twos, 1])
        elif value == 2:
            twos += 1
        else:
            pending_threes += 1
            if i < n - 1 and a[i + 1] == 3:
                continue
            for twos_before, count in ones:
                choices = pow(2, twos - twos_before, MOD) - 1
                total = (total + choices * count % MOD * pending_threes) % MOD
            pending_threes = 0
    return total