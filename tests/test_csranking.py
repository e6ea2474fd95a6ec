import pytest

from contestkit.csranking import (
    butterfly_sum,
    is_number,
    max_points_in_angle,
    min_chessboard_swaps,
    min_tree_cost,
)

CHAIN = [(1, 5), (2, 7)]
STAR = [(1, 3), (1, 1), (1, 2)]


def test_tree_chain_cut_at_root():
    assert min_tree_cost(3, 1, CHAIN) == 5


def test_tree_chain_cut_below():
    assert min_tree_cost(3, 2, CHAIN) == 7


def test_tree_chain_keep_all():
    assert min_tree_cost(3, 3, CHAIN) == 0


def test_tree_star_keeps_costliest_child():
    assert min_tree_cost(4, 2, STAR) == 1 + 2


def test_tree_k_larger_than_tree():
    assert min_tree_cost(4, 10, STAR) == 0


def test_tree_cost_not_increasing_with_k_on_chain():
    costs = [min_tree_cost(3, k, CHAIN) for k in (1, 2, 3)]
    assert costs[-1] <= min(costs)


def test_tree_wrong_edge_count():
    with pytest.raises(ValueError):
        min_tree_cost(4, 2, CHAIN)


def test_tree_bad_k():
    with pytest.raises(ValueError):
        min_tree_cost(3, 0, CHAIN)


def test_butterfly_single():
    assert butterfly_sum([4]) == 5


def test_butterfly_ignores_duplicates():
    assert butterfly_sum([1, 1, 2, 2, 2]) == butterfly_sum([1, 2])


def test_butterfly_empty():
    assert butterfly_sum([]) == 0


def test_angle_quarter_turn():
    points = [(1, 0), (0, 1), (-1, 0)]
    assert max_points_in_angle(points, 90, (0, 0)) == 2


def test_angle_full_turn_covers_all():
    points = [(1, 0), (0, 1), (-1, 0), (3, -4)]
    assert max_points_in_angle(points, 360, (0, 0)) == len(points)


def test_angle_counts_points_at_origin():
    points = [(2, 2), (2, 2), (2, 2)]
    assert max_points_in_angle(points, 0, (2, 2)) == len(points)


def test_angle_translation_invariant():
    points = [(1, 0), (0, 1), (-1, 0), (1, 1), (-2, -3)]
    shifted = [(x + 7, y - 4) for x, y in points]
    assert max_points_in_angle(points, 100, (0, 0)) == max_points_in_angle(shifted, 100, (7, -4))


@pytest.mark.parametrize("text", ["123", "-7", "+0.5", "3.", "1.5e-3", "2e10", "."])
def test_is_number_accepts(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["", "e5", "1e", "1.2.3", "1E5", "abc", "1e2.5", "+"])
def test_is_number_rejects(text):
    assert is_number(text) is False


def test_chessboard_already_arranged():
    assert min_chessboard_swaps(["01", "10"]) == 0


def test_chessboard_other_phase():
    assert min_chessboard_swaps(["10", "01"]) == 0


def test_chessboard_impossible():
    assert min_chessboard_swaps(["00", "11"]) is None


def test_chessboard_one_row_swap():
    assert min_chessboard_swaps(["0101", "1010", "1010", "0101"]) == 1


def test_chessboard_not_square():
    with pytest.raises(ValueError):
        min_chessboard_swaps(["010", "101"])