"""Graph and interval solutions: tree drawing passes, friendly segments and greetings."""

from __future__ import annotations

from collections.abc import Iterable

from sortedcontainers import SortedSet


def count_readings(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of passes over the edge list needed to draw the tree rooted at node 1.

    Each pass walks the edges in their given order and draws an edge once one of
    its ends is already drawn. Nodes are numbered from 1 to ``n``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    edge_list = list(edges)
    if len(edge_list) != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    first_root_edge = 0
    for index, (u, v) in enumerate(edge_list, start=1):
        for node in (u, v):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is outside 1..{n}")
        if first_root_edge == 0 and 1 in (u, v):
            first_root_edge = index
        adjacency[u].append((index, v))
        adjacency[v].append((index, u))

    readings = [0] * (n + 1)  # 0 marks a node not reached yet
    stack = [(1, 1, first_root_edge)]
    while stack:
        node, depth, via = stack.pop()
        if readings[node]:
            continue
        readings[node] = depth
        for index, other in adjacency[node]:
            if not readings[other]:
                stack.append((other, depth + 1 if index < via else depth, index))
    if not all(readings[1:]):
        raise ValueError("edges do not form a tree")
    return max(readings)


def count_good_segments(n: int, pairs: Iterable[tuple[int, int]]) -> int:
    """Count segments of ``1..n`` that hold no pair of friends from ``pairs``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    # reach[i]: how many further positions a segment starting at i may take.
    reach = [0] + [n - i for i in range(1, n + 2)]
    for a, b in pairs:
        for person in (a, b):
            if not 1 <= person <= n:
                raise ValueError(f"person {person} is outside 1..{n}")
        low, high = min(a, b), max(a, b)
        reach[low] = min(reach[low], high - low - 1)

    for i in range(n - 1, 0, -1):
        reach[i] = min(reach[i], reach[i + 1] + 1)

    total = n
    for i in range(1, n):
        if i != 1 and reach[i] < reach[i - 1]:
            continue
        if reach[i] <= reach[i + 1]:
            total += reach[i]
        else:
            total += reach[i] * (reach[i] + 1) // 2
    return total


def count_greetings(people: Iterable[tuple[int, int]]) -> int:
    """Count greetings between people walking from their start to their end point.

    Two people greet when one's route lies strictly inside the other's, which is
    when the faster walker catches up with the other.
    """
    events: list[tuple[int, bool, int]] = []
    for start, end in people:
        if start >= end:
            raise ValueError("every start must lie before its end")
        events.append((start, True, end))
        events.append((end, False, start))
    events.sort()

    open_starts: SortedSet = SortedSet()
    greetings = 0
    for position, is_start, other in events:
        if is_start:
            open_starts.add(position)
        else:
            open_starts.discard(other)
            greetings += open_starts.bisect_left(other)
    return greetings