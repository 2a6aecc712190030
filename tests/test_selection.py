import random
from itertools import combinations

import pytest

from contestkit.selection import (
    best_activity_sum,
    max_painted_sum,
    min_after_operations,
    top_three,
)


def _brute_min(values, k):
    if k == 0:
        return min(values)
    best = min(values)
    for x, y in combinations(values, 2):
        best = min(best, _brute_min(values + [abs(x - y)], k - 1))
    return best


@pytest.mark.parametrize("seed", range(15))
@pytest.mark.parametrize("k", [1, 2])
def test_min_after_operations_matches_brute_force(seed, k):
    rng = random.Random(seed)
    values = [rng.randint(1, 40) for _ in range(rng.randint(2, 5))]
    assert min_after_operations(values, k) == _brute_min(values, k)


@pytest.mark.parametrize("k", [3, 4, 10])
def test_min_after_operations_many_reaches_zero(k):
    assert min_after_operations([7, 100, 23], k) == 0


def test_min_after_operations_empty():
    with pytest.raises(ValueError):
        min_after_operations([], 1)


def test_top_three_replacement_order():
    assert top_three([2, 2, 1, 2, 3]) == [(2, 1), (2, 3), (3, 4)]


@pytest.mark.parametrize("seed", range(10))
def test_top_three_holds_largest_values(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 9) for _ in range(rng.randint(3, 12))]
    kept = top_three(values)
    assert kept == sorted(kept)
    assert [v for v, _ in kept] == sorted(values)[-3:]
    assert all(values[i] == v for v, i in kept)
    assert len({i for _, i in kept}) == 3


def test_top_three_too_short():
    with pytest.raises(ValueError):
        top_three([1, 2])


@pytest.mark.parametrize("seed", range(15))
def test_best_activity_sum_matches_brute_force(seed):
    rng = random.Random(seed)
    n = rng.randint(3, 8)
    a, b, c = ([rng.randint(1, 30) for _ in range(n)] for _ in range(3))
    expected = max(
        a[x] + b[y] + c[z]
        for x in range(n)
        for y in range(n)
        for z in range(n)
        if len({x, y, z}) == 3
    )
    assert best_activity_sum(a, b, c) == expected


def test_best_activity_sum_length_mismatch():
    with pytest.raises(ValueError):
        best_activity_sum([1, 2, 3], [1, 2, 3], [1, 2])


@pytest.mark.parametrize("seed", range(10))
def test_max_painted_sum_takes_top_values(seed):
    rng = random.Random(seed)
    values = [rng.randint(1, 50) for _ in range(rng.randint(4, 9))]
    for k in range(2, len(values)):
        assert max_painted_sum(values, k) == sum(sorted(values)[-(k + 1):])


def test_max_painted_sum_adjacent_maxima_at_end():
    a = [1, 2, 3, 4]
    assert max_painted_sum(a, 1) == a[3] + a[1]


def test_max_painted_sum_separated_maxima():
    a = [4, 1, 1, 3]
    assert max_painted_sum(a, 1) == a[0] + a[3]


def test_max_painted_sum_bad_k():
    with pytest.raises(ValueError):
        max_painted_sum([1, 2, 3], 3)