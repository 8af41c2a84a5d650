import pytest

from primers.arrays import sum_all, sum_all_tails, total


@pytest.mark.parametrize(
    ("numbers", "expected"),
    [
        ([1, 2, 3, 4, 5], 15),
        ([1, 2, 3], 6),
        ([], 0),
    ],
)
def test_total(numbers, expected):
    assert total(numbers) == expected


def test_total_accepts_generator():
    assert total(n for n in range(4)) == 6


def test_sum_all():
    assert sum_all([1, 2], [0, 9]) == [3, 9]


def test_sum_all_no_collections():
    assert sum_all() == []


def test_sum_all_tails():
    assert sum_all_tails([1, 2], [0, 9]) == [2, 9]


def test_sum_all_tails_empty_collection():
    assert sum_all_tails([], [3, 4, 5]) == [0, 9]


def test_sum_all_tails_single_element():
    assert sum_all_tails([7]) == [0]