"""Grid solutions: colour unification and ball pushing."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from itertools import takewhile


def _rectangular(grid: Sequence[Sequence]) -> list[list]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def min_steps_to_unify(grid: Sequence[Sequence[Hashable]]) -> int:
    """Fewest steps to make the whole grid one colour.

    A step recolours a set of same-coloured cells no two of which are adjacent.
    """
    rows = _rectangular(grid)
    height, width = len(rows), len(rows[0])
    has_neighbour: dict[Hashable, bool] = {}
    for i, row in enumerate(rows):
        for j, color in enumerate(row):
            has_neighbour.setdefault(color, False)
            if (j + 1 < width and row[j + 1] == color) or (
                i + 1 < height and rows[i + 1][j] == color
            ):
                has_neighbour[color] = True
    clustered = sum(has_neighbour.values())
    scattered = len(has_neighbour) - clustered
    if clustered == 0:
        return scattered - 1
    return 2 * (clustered - 1) + scattered


def is_pushable(grid: Sequence[str]) -> bool:
    """Whether the '1' cells can be made by pushing balls in from the top or the left.

    A cell is reachable when every cell before it in its row, or above it in its
    column, also holds a ball.
    """
    rows = _rectangular(grid)
    if any(cell not in "01" for row in rows for cell in row):
        raise ValueError("grid cells must be '0' or '1'")
    reachable: set[tuple[int, int]] = set()
    for i, row in enumerate(rows):
        for j, _ in enumerate(takewhile(lambda cell: cell == "1", row)):
            reachable.add((i, j))
    for j, column in enumerate(zip(*rows)):
        for i, _ in enumerate(takewhile(lambda cell: cell == "1", column)):
            reachable.add((i, j))
    return all(
        (i, j) in reachable
        for i, row in enumerate(rows)
        for j, cell in enumerate(row)
        if cell == "1"
    )