from collections import Counter
from itertools import combinations

import pytest

from algocollection.puzzles import Move, tower_of_hanoi, tug_of_war

SOURCE_VALUES = [23, 45, -34, 12, 0, 98, -99, 4, 189, -1, 4]


def _play(disks, moves):
    poles = {"p": list(range(disks, 0, -1)), "q": [], "r": []}
    for move in moves:
        assert poles[move.source], "move from an empty pole"
        disk = poles[move.source].pop()
        assert disk == move.disk
        assert not poles[move.target] or poles[move.target][-1] > disk
        poles[move.target].append(disk)
    return poles


def test_hanoi_single_disk():
    assert list(tower_of_hanoi(1, "p", "q", "r")) == [Move(1, "p", "q")]


def test_move_text_format():
    assert str(Move(1, "p", "q")) == "Move circle 1 from pole p to pole q"


@pytest.mark.parametrize("disks", [1, 2, 3, 4, 6])
def test_hanoi_moves_are_legal_and_complete(disks):
    moves = list(tower_of_hanoi(disks, "p", "q", "r"))
    assert len(moves) == 2**disks - 1
    poles = _play(disks, moves)
    assert poles["p"] == []
    assert poles["r"] == []
    assert poles["q"] == list(range(disks, 0, -1))


def test_hanoi_largest_disk_moves_once_in_middle():
    moves = list(tower_of_hanoi(3, "p", "q", "r"))
    assert moves[len(moves) // 2] == Move(3, "p", "q")


def test_hanoi_zero_disks():
    assert list(tower_of_hanoi(0, "p", "q", "r")) == []


def _best_gap(values):
    total = sum(values)
    return min(
        abs(total - 2 * sum(group)) for group in combinations(values, len(values) // 2)
    )


@pytest.mark.parametrize(
    "values",
    [SOURCE_VALUES, [3, 4, 5, -3, 100, 1, 89, 54, 23, 20], [1, 2, 3, 4], [5, 5, 5, 5, 5, 5]],
)
def test_tug_of_war_partition_is_optimal(values):
    first, second = tug_of_war(values)
    assert len(first) == len(values) // 2
    assert len(second) == len(values) - len(values) // 2
    assert Counter(first) + Counter(second) == Counter(values)
    assert abs(sum(first) - sum(second)) == _best_gap(values)


def test_tug_of_war_keeps_original_order():
    first, second = tug_of_war(SOURCE_VALUES)
    positions = {value: index for index, value in enumerate(SOURCE_VALUES)}
    for group in (first, second):
        unique = [v for v in group if SOURCE_VALUES.count(v) == 1]
        assert [positions[v] for v in unique] == sorted(positions[v] for v in unique)


def test_tug_of_war_empty_and_single():
    assert tug_of_war([]) == ([], [])
    assert tug_of_war([7]) == ([], [7])