from collections import Counter

import pytest

from philo.seating import assign_forks


def test_three_form_a_ring():
    assert assign_forks(3) == [(0, 1), (1, 2), (2, 0)]


def test_two_share_both_forks():
    assert assign_forks(2) == [(0, 1), (1, 0)]


def test_five_ring_then_pair():
    assert assign_forks(5)[3:] == [(3, 4), (4, 3)]


@pytest.mark.parametrize("count", [2, 3, 4, 5, 6, 7, 10, 11, 200, 201])
def test_left_fork_is_own_index(count):
    forks = assign_forks(count)
    assert len(forks) == count
    assert [left for left, _ in forks] == list(range(count))


@pytest.mark.parametrize("count", [2, 3, 4, 5, 8, 9, 100, 101])
def test_each_fork_shared_by_exactly_two(count):
    forks = assign_forks(count)
    usage = Counter(idx for pair in forks for idx in pair)
    assert set(usage) == set(range(count))
    assert all(n == 2 for n in usage.values())


@pytest.mark.parametrize("count", [4, 6, 9, 13])
def test_no_philosopher_holds_same_fork_twice(count):
    assert all(left != right for left, right in assign_forks(count))


@pytest.mark.parametrize("count", [-1, 0, 1])
def test_too_few_philosophers(count):
    with pytest.raises(ValueError):
        assign_forks(count)