"""String solutions: bracket colouring, reversal comparison and zero arrangement."""

from __future__ import annotations


def color_brackets(s: str) -> tuple[int, list[int]] | None:
    """Split a bracket string into the fewest beautiful sequences.

    A beautiful sequence is regular, or regular when reversed. Returns the number
    of colours used and the colour (1 or 2) of every bracket. Returns ``None``
    when the string cannot be split because its brackets do not balance.
    """
    if any(c not in "()" for c in s):
        raise ValueError("string may hold only '(' and ')'")
    opened = 0  # unmatched '(' waiting for ')'
    closed = 0  # unmatched ')' waiting for '('
    saw_opened = saw_closed = False
    forward: list[bool] = []
    for c in s:
        if c == ")":
            if opened:
                opened -= 1
                forward.append(True)
            else:
                closed += 1
                forward.append(False)
        else:
            if closed:
                closed -= 1
                forward.append(False)
            else:
                opened += 1
                forward.append(True)
        saw_opened = saw_opened or opened > 0
        saw_closed = saw_closed or closed > 0

    if opened or closed:
        return None
    colors = [1 if is_forward or not saw_opened else 2 for is_forward in forward]
    return int(saw_opened) + int(saw_closed), colors


def can_be_smaller(s: str, k: int) -> bool:
    """Whether ``s`` can be made lexicographically smaller than its reverse.

    With ``k`` swaps allowed, any string holding two different characters can;
    with none, ``s`` must already be smaller than its reverse.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    if k == 0:
        return s < s[::-1]
    return any(c != s[0] for c in s[1:])


def can_arrange_zeros(a: str, b: str) -> bool:
    """Whether swaps between ``a`` and ``b`` can fill ``a`` with zeros.

    Even positions of ``a`` trade with odd positions of ``b`` and the other way round.
    """
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    n = len(a)
    a_even = a[0::2].count("0")
    a_odd = a[1::2].count("0")
    b_even = b[0::2].count("0")
    b_odd = b[1::2].count("0")
    return a_even + b_odd >= (n + 1) // 2 and a_odd + b_even >= n // 2