import pytest

from ladderleague.exceptions import GroupingException
from ladderleague.models import MatchId, MatchScore, Player
from ladderleague.ranking import resolve_group_placements


def _players(*names):
    return [Player(id=name, name=name, rank=i) for i, name in enumerate(names, 1)]


def _ids(placement):
    return [p.id for p in placement]


def _score(s1, s2):
    return {"score1": s1, "score2": s2}


def test_bracket_scenario():
    group = _players("P1", "P2", "P3", "P4")
    scores = {
        "g1-r1-m1": _score("10", "5"),
        "g1-r1-m2": _score("10", "5"),
        "g1-r2-m1": _score("10", "8"),
        "g1-r2-m2": _score("10", "9"),
    }
    assert _ids(resolve_group_placements(group, 1, scores)) == ["P1", "P2", "P4", "P3"]


def test_bracket_upsets():
    group = _players("P1", "P2", "P3", "P4")
    scores = {
        "g2-r1-m1": _score("3", "11"),
        "g2-r1-m2": _score("7", "11"),
        "g2-r2-m1": _score("11", "9"),
        "g2-r2-m2": _score("4", "11"),
    }
    # final: P4 vs P3, consolation: P1 vs P2
    assert _ids(resolve_group_placements(group, 2, scores)) == ["P4", "P3", "P2", "P1"]


def test_bracket_missing_scores_default_to_first_listed():
    group = _players("P1", "P2", "P3", "P4")
    assert _ids(resolve_group_placements(group, 1, {})) == ["P1", "P2", "P4", "P3"]


def test_bracket_invalid_side_counts_as_zero():
    group = _players("P1", "P2", "P3", "P4")
    scores = {
        "g1-r1-m1": _score("abc", "2"),
        "g1-r1-m2": _score("", "1"),
        "g1-r2-m1": _score("5", "x"),
        "g1-r2-m2": _score("1", "0"),
    }
    # P4 beats P1 (0-2), P3 beats P2 (0-1), P4 beats P3 (5-0), P1 beats P2 (1-0)
    assert _ids(resolve_group_placements(group, 1, scores)) == ["P4", "P3", "P1", "P2"]


def test_bracket_uses_own_group_number():
    group = _players("P1", "P2", "P3", "P4")
    other_group_scores = {"g1-r1-m1": _score("0", "10")}
    assert _ids(resolve_group_placements(group, 2, other_group_scores)) == [
        "P1",
        "P2",
        "P4",
        "P3",
    ]


def test_round_robin_cycle_broken_by_point_differential():
    group = _players("A", "B", "C")
    scores = {
        "g1-m1": _score("10", "8"),  # A beats B
        "g1-m2": _score("2", "10"),  # C beats A
        "g1-m3": _score("10", "9"),  # B beats C
    }
    assert _ids(resolve_group_placements(group, 1, scores)) == ["C", "B", "A"]


def test_round_robin_orders_by_wins():
    group = _players("A", "B", "C")
    scores = {
        "g3-m1": _score("5", "11"),
        "g3-m2": _score("5", "11"),
        "g3-m3": _score("11", "5"),
    }
    assert _ids(resolve_group_placements(group, 3, scores)) == ["B", "C", "A"]


def test_round_robin_partial_tie_keeps_ladder_order():
    group = _players("A", "B", "C")
    # C beats A, B beats C, A vs B never entered
    scores = {"g1-m2": _score("1", "11"), "g1-m3": _score("11", "1")}
    # B 1 win, C 1 win, A 0 wins -> B before C by rank
    assert _ids(resolve_group_placements(group, 1, scores)) == ["B", "C", "A"]


def test_round_robin_without_scores_keeps_order():
    group = _players("A", "B", "C")
    assert _ids(resolve_group_placements(group, 1, {})) == ["A", "B", "C"]


def test_round_robin_ignores_unset_and_invalid_matches():
    group = _players("A", "B", "C")
    scores = {
        "g1-m1": _score("", "10"),
        "g1-m2": _score("x", "y"),
        "g1-m3": _score("3", "11"),
    }
    assert _ids(resolve_group_placements(group, 1, scores)) == ["C", "A", "B"]


def test_exhibition_match():
    group = _players("A", "B")
    assert _ids(resolve_group_placements(group, 1, {"g1-m1": _score("4", "11")})) == [
        "B",
        "A",
    ]
    assert _ids(resolve_group_placements(group, 1, {"g1-m1": _score("11", "4")})) == [
        "A",
        "B",
    ]


def test_exhibition_unset_preserves_order():
    group = _players("A", "B")
    assert _ids(resolve_group_placements(group, 1, {"g1-m1": _score("", "11")})) == [
        "A",
        "B",
    ]
    assert _ids(resolve_group_placements(group, 1, None)) == ["A", "B"]


def test_accepts_typed_score_map():
    group = _players("A", "B")
    scores = {MatchId.group(1, 1): MatchScore("1", "3", note="walkover")}
    assert _ids(resolve_group_placements(group, 1, scores)) == ["B", "A"]


@pytest.mark.parametrize("size", [2, 3, 4])
def test_placement_is_permutation(size):
    group = _players(*[f"X{i}" for i in range(size)])
    placement = resolve_group_placements(group, 1, {})
    assert sorted(_ids(placement)) == sorted(_ids(group))
    assert placement is not group


def test_unsupported_group_size():
    with pytest.raises(GroupingException):
        resolve_group_placements(_players("A", "B", "C", "D", "E"), 1, {})
