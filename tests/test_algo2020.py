import pytest

from contestkit.algo2020 import checkout_time, min_square_sum, min_vitamin_steps


def test_checkout_unlimited_speed():
    assert checkout_time(1, 1, 1, 100, 0) == pytest.approx(2.0)


def test_checkout_speed_capped():
    assert checkout_time(10, 1, 1, 1, 0) == pytest.approx(11.0)


def test_checkout_large_limit_is_irrelevant():
    assert checkout_time(50, 2, 3, 1e9, 1.5) == pytest.approx(checkout_time(50, 2, 3, 1e12, 1.5))


def test_checkout_exceeds_delay():
    assert checkout_time(20, 2, 2, 5, 3) > 3


def test_checkout_rejects_zero_acceleration():
    with pytest.raises(ValueError):
        checkout_time(10, 0, 1, 1, 0)


def test_square_sum_of_exact_block():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert min_square_sum(grid) == sum(map(sum, grid))


def test_square_sum_picks_smallest_block():
    grid = [[9, 9, 9, 9], [9, 0, 0, 0], [9, 0, 0, 0], [9, 0, 0, 0]]
    assert min_square_sum(grid) == 0


def test_square_sum_not_above_any_block():
    grid = [[5, 1, 7, 2], [3, 8, 2, 6], [4, 4, 9, 1], [2, 6, 3, 3]]
    top_left = sum(sum(row[:3]) for row in grid[:3])
    assert min_square_sum(grid) <= top_left


def test_square_sum_small_grid():
    with pytest.raises(ValueError):
        min_square_sum([[1, 2, 3], [4, 5, 6]])


def test_square_sum_ragged_grid():
    with pytest.raises(ValueError):
        min_square_sum([[1, 2, 3], [4, 5], [7, 8, 9]])


def test_vitamin_single_amount():
    assert min_vitamin_steps([3], 3 * 4) == 4


def test_vitamin_two_amounts():
    assert min_vitamin_steps([2, 5], 7) == 2


def test_vitamin_impossible():
    assert min_vitamin_steps([2, 4], 7) is None


def test_vitamin_requires_amounts():
    with pytest.raises(ValueError):
        min_vitamin_steps([], 5)


def test_vitamin_rejects_zero_amount():
    with pytest.raises(ValueError):
        min_vitamin_steps([2, 0], 5)