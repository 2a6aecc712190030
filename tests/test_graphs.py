import pytest

from contestkit.graphs import count_good_segments, count_greetings, count_readings


def test_readings_sample_tree():
    edges = [(4, 5), (1, 3), (1, 2), (3, 4), (1, 6)]
    assert count_readings(6, edges) == 2


def test_readings_single_node():
    assert count_readings(1, []) == 1


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_readings_path_in_order_takes_one_pass(n):
    edges = [(i, i + 1) for i in range(1, n)]
    assert count_readings(n, edges) == 1


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_readings_path_reversed_takes_one_pass_per_edge(n):
    edges = [(i, i + 1) for i in range(n - 1, 0, -1)]
    assert count_readings(n, edges) == n - 1


def test_readings_star_takes_one_pass():
    edges = [(1, i) for i in range(2, 7)]
    assert count_readings(6, edges) == 1


def test_readings_wrong_edge_count():
    with pytest.raises(ValueError):
        count_readings(3, [(1, 2)])


def test_readings_node_out_of_range():
    with pytest.raises(ValueError):
        count_readings(3, [(1, 2), (2, 4)])


def test_readings_not_a_tree():
    with pytest.raises(ValueError):
        count_readings(4, [(2, 3), (3, 4), (4, 2)])


def test_good_segments_sample():
    assert count_good_segments(3, [(1, 3), (2, 3)]) == 4


@pytest.mark.parametrize("n", [1, 2, 3, 6, 10])
def test_good_segments_without_pairs_counts_all(n):
    assert count_good_segments(n, []) == n * (n + 1) // 2


def test_good_segments_order_of_pair_does_not_matter():
    assert count_good_segments(4, [(2, 1), (3, 2)]) == count_good_segments(4, [(1, 2), (2, 3)])


def test_good_segments_adjacent_pairs_leave_singles():
    n = 5
    pairs = [(i, i + 1) for i in range(1, n)]
    assert count_good_segments(n, pairs) == n


def test_good_segments_person_out_of_range():
    with pytest.raises(ValueError):
        count_good_segments(3, [(1, 4)])


def test_greetings_sample():
    people = [(2, 6), (3, 9), (4, 5), (1, 8), (7, 10), (-2, 100)]
    assert count_greetings(people) == 9


@pytest.mark.parametrize("n", [1, 2, 4, 7])
def test_greetings_nested_chain(n):
    people = [(-i, i) for i in range(1, n + 1)]
    assert count_greetings(people) == n * (n - 1) // 2


def test_greetings_disjoint_routes():
    people = [(0, 1), (2, 3), (4, 5)]
    assert count_greetings(people) == 0


def test_greetings_crossing_routes():
    people = [(0, 2), (1, 3), (2 + 0, 4)] if False else [(0, 2), (1, 3)]
    assert count_greetings(people) == 0


def test_greetings_order_independent():
    people = [(2, 6), (3, 9), (4, 5), (1, 8)]
    assert count_greetings(people) == count_greetings(list(reversed(people)))


def test_greetings_bad_route():
    with pytest.raises(ValueError):
        count_greetings([(5, 3)])