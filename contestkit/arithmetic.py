"""Number-theoretic solutions: permutation scores, moduli, squares and simple games."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt, lcm

_MODULUS_LIMIT = 1 << 62


def max_permutation_score(n: int, x: int, y: int) -> int:
    """Largest score of a permutation of ``1..n``.

    The score adds the values at positions divisible by ``x`` and subtracts
    those at positions divisible by ``y``.
    """
    if n < 1 or x < 1 or y < 1:
        raise ValueError("n, x and y must be positive")
    both = n // lcm(x, y)
    only_x = n // x - both
    only_y = n // y - both
    rest = n - only_x
    gained = n * (n + 1) // 2 - rest * (rest + 1) // 2
    lost = only_y * (only_y + 1) // 2
    return gained - lost


def smallest_distinguishing_modulus(a: Sequence[int]) -> int:
    """Smallest power of two ``m`` for which the values of ``a`` are not all equal modulo ``m``."""
    if not a:
        raise ValueError("sequence must not be empty")
    modulus = 1
    while modulus < _MODULUS_LIMIT:
        if len({value % modulus for value in a}) > 1:
            return modulus
        modulus *= 2
    raise ValueError("values agree modulo every power of two tried")


def can_join(k: int) -> bool:
    """Whether the player can take part in match ``k`` of the rotating game."""
    return k % 3 == 1


def is_square_triangular(n: int) -> bool:
    """Whether the triangular number ``n * (n + 1) / 2`` is a perfect square."""
    if n < 1:
        raise ValueError("n must be at least 1")
    total = n * (n + 1) // 2
    root = isqrt(total)
    return root * root == total


def avoid_square_prefixes(n: int) -> list[int] | None:
    """A permutation of ``1..n`` none of whose prefix sums is a perfect square.

    Returns ``None`` when no such permutation exists.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if is_square_triangular(n):
        return None
    result: list[int] = []
    i = 1
    while i <= n:
        if is_square_triangular(i):
            result.extend((i + 1, i))
            i += 2
        else:
            result.append(i)
            i += 1
    return result


def attacker_wins(x: int, y: int, a: int) -> bool:
    """Whether the attack falling on day ``a`` lands after ``x`` steps of each ``x + y`` cycle."""
    if x < 0 or y < 0 or x + y == 0:
        raise ValueError("x and y must be non-negative and not both zero")
    return a % (x + y) >= x


def game_winner(m: int, a: Sequence[int]) -> str:
    """Winner of the digit-reversal game: "Sasha" or "Anna".

    Anna strips trailing zeros from the numbers with the most of them, Sasha keeps
    the rest by concatenation; Sasha wins when more than ``m`` digits remain.
    """
    trailing: list[int] = []
    digits = 0
    for value in a:
        if value < 0:
            raise ValueError("values must be non-negative")
        if value == 0:
            continue
        text = str(value)
        stripped = text.rstrip("0")
        trailing.append(len(text) - len(stripped))
        digits += len(stripped)
    trailing.sort(reverse=True)
    digits += sum(trailing[1::2])
    return "Sasha" if digits > m else "Anna"