import random
from itertools import combinations

import pytest

from contestkit.arrays import (
    max_largest_coin,
    max_pairwise_difference,
    max_triple_beauty,
    min_max_step,
    recover_array,
    tea_consumption,
)


def _pair_minima(values):
    return [min(x, y) for x, y in combinations(values, 2)]


# tea_consumption

def test_tea_worked_example():
    assert tea_consumption([10, 20, 15], [9, 8, 6]) == [9, 9, 12]


def test_tea_small_amounts_drunk_by_own_taster():
    a = [3, 1, 4, 1, 5]
    b = [10, 10, 10, 10, 10]
    assert tea_consumption(a, b) == a


def test_tea_huge_amounts_fill_every_taster():
    assert tea_consumption([10**9] * 3, [1, 1, 1]) == [1, 2, 3]


def test_tea_total_never_exceeds_tea():
    rng = random.Random(7)
    for _ in range(20):
        n = rng.randint(1, 8)
        a = [rng.randint(1, 20) for _ in range(n)]
        b = [rng.randint(1, 20) for _ in range(n)]
        result = tea_consumption(a, b)
        assert len(result) == n
        assert sum(result) <= sum(a)
        assert all(0 <= r for r in result)


def test_tea_length_mismatch():
    with pytest.raises(ValueError):
        tea_consumption([1, 2], [1])


# max_triple_beauty

def test_triple_all_ones():
    assert max_triple_beauty([1, 1, 1]) == 1


def test_triple_short_input_is_zero():
    assert max_triple_beauty([5, 9]) == 0


def test_triple_negative_floor():
    assert max_triple_beauty([-5, -5, -5]) == 0


def test_triple_reverse_invariant():
    rng = random.Random(3)
    for _ in range(20):
        a = [rng.randint(1, 50) for _ in range(rng.randint(3, 9))]
        assert max_triple_beauty(a) == max_triple_beauty(a[::-1])


def test_triple_shift_adds_three_times():
    rng = random.Random(5)
    for _ in range(20):
        a = [rng.randint(1, 50) for _ in range(rng.randint(3, 9))]
        shifted = [v + 100 for v in a]
        assert max_triple_beauty(shifted) == max_triple_beauty(a) + 300


# min_max_step

def test_step_single_colour_is_zero():
    assert min_max_step(1, [1, 1, 1, 1]) == 0


def test_step_alternating():
    assert min_max_step(2, [1, 2, 1, 2, 1, 2]) == 1


def test_step_bounded_by_half():
    rng = random.Random(11)
    for _ in range(30):
        k = rng.randint(1, 4)
        colors = [rng.randint(1, k) for _ in range(rng.randint(1, 12))]
        result = min_max_step(k, colors)
        assert 0 <= result <= len(colors) // 2


def test_step_colour_out_of_range():
    with pytest.raises(ValueError):
        min_max_step(2, [1, 3])


def test_step_needs_a_colour():
    with pytest.raises(ValueError):
        min_max_step(0, [])


# recover_array

def test_recover_two_elements():
    assert recover_array(2, [5]) == [5, 5]


def test_recover_round_trip():
    rng = random.Random(13)
    for _ in range(30):
        n = rng.randint(2, 8)
        original = [rng.randint(-5, 5) for _ in range(n)]
        minima = _pair_minima(original)
        rng.shuffle(minima)
        recovered = recover_array(n, minima)
        assert len(recovered) == n
        assert recovered == sorted(recovered, reverse=True)
        assert sorted(_pair_minima(recovered)) == sorted(minima)


def test_recover_wrong_count():
    with pytest.raises(ValueError):
        recover_array(3, [1, 2])


def test_recover_inconsistent():
    with pytest.raises(ValueError):
        recover_array(3, [1, 2, 3])


def test_recover_small_n():
    with pytest.raises(ValueError):
        recover_array(1, [])


# max_pairwise_difference

def test_difference_equal_elements():
    assert max_pairwise_difference([7, 7]) == 0


def test_difference_shift_and_negation_invariant():
    rng = random.Random(17)
    for _ in range(20):
        a = [rng.randint(-100, 100) for _ in range(rng.randint(2, 10))]
        base = max_pairwise_difference(a)
        assert max_pairwise_difference([v + 42 for v in a]) == base
        assert max_pairwise_difference([-v for v in a]) == base
        assert base >= 0


def test_difference_needs_two():
    with pytest.raises(ValueError):
        max_pairwise_difference([1])


# max_largest_coin

def test_coin_mixed_pair():
    assert max_largest_coin([3, 2]) == 5


def test_coin_all_even_gives_max():
    assert max_largest_coin([2, 4, 6]) == 6


def test_coin_all_odd_gives_max():
    assert max_largest_coin([1, 3]) == 3


def test_coin_order_invariant_and_at_least_max():
    rng = random.Random(19)
    for _ in range(20):
        a = [rng.randint(1, 30) for _ in range(rng.randint(1, 8))]
        shuffled = a[:]
        rng.shuffle(shuffled)
        result = max_largest_coin(a)
        assert result == max_largest_coin(shuffled)
        assert result >= max(a)
        assert result <= sum(a)


def test_coin_empty():
    with pytest.raises(ValueError):
        max_largest_coin([])