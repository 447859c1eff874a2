import pytest

from ladderleague.exceptions import (
    InsufficientPlayersException,
    NoValidGroupingException,
)
from ladderleague.models import Player
from ladderleague.ranking import find_group_sizes, generate_groups


def _players(count):
    return [Player(id=f"p{i}", name=f"P{i}", rank=i) for i in range(1, count + 1)]


@pytest.mark.parametrize("count", [0, 1])
def test_too_few_players(count):
    with pytest.raises(InsufficientPlayersException):
        generate_groups(_players(count))


def test_five_players_have_no_grouping():
    with pytest.raises(NoValidGroupingException):
        generate_groups(_players(5))


def test_two_players_form_exhibition_group():
    players = _players(2)
    groups = generate_groups(players)
    assert groups == [players]
    assert groups[0] is not players


def test_exhibition_can_be_disabled():
    with pytest.raises(NoValidGroupingException):
        generate_groups(_players(2), allow_exhibition_match=False)


@pytest.mark.parametrize("count", [n for n in range(2, 61) if n != 5])
def test_group_sizes_cover_all_players(count):
    players = _players(count)
    groups = generate_groups(players)

    assert all(len(group) in (2, 3, 4) for group in groups)
    assert sum(len(group) for group in groups) == count
    flattened = [p for group in groups for p in group]
    assert flattened == players


@pytest.mark.parametrize(
    "count, expected",
    [(3, (0, 1)), (4, (1, 0)), (6, (0, 2)), (7, (1, 1)), (8, (2, 0)),
     (9, (0, 3)), (10, (1, 2)), (11, (2, 1)), (12, (3, 0)), (13, (1, 3))],
)
def test_prefers_most_groups_of_four(count, expected):
    assert find_group_sizes(count) == expected


def test_fours_come_before_threes():
    groups = generate_groups(_players(10))
    assert [len(g) for g in groups] == [4, 3, 3]
    assert [p.rank for p in groups[0]] == [1, 2, 3, 4]


def test_input_not_mutated():
    players = _players(7)
    snapshot = list(players)
    generate_groups(players)
    assert players == snapshot
