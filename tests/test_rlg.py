import json

import pytest

from ladderleague.testing import RandomLeagueGenerator, RLGConfig, ScorePattern


@pytest.mark.parametrize("pattern", list(ScorePattern))
def test_generated_season_keeps_ladder_consistent(pattern):
    config = RLGConfig(num_players=17, num_rounds=6, score_pattern=pattern, seed=11)
    league = RandomLeagueGenerator(config).generate_complete_league()

    assert len(league["rounds"]) == 6
    ids = sorted(p.id for p in league["players_initial"])
    for snapshot in league["rounds"]:
        assert sorted(p.id for p in snapshot.players_after) == ids
        assert [p.rank for p in snapshot.players_after] == list(range(1, 18))

        present = set(snapshot.present_player_ids)
        absent_before = [p.id for p in snapshot.players_before if p.id not in present]
        absent_after = [p.id for p in snapshot.players_after if p.id not in present]
        assert absent_before == absent_after


def test_seed_makes_generation_reproducible():
    config = RLGConfig(num_players=12, num_rounds=4, seed=5)
    first = RandomLeagueGenerator(config).generate_complete_league()
    second = RandomLeagueGenerator(config).generate_complete_league()
    assert [p.id for p in first["players"]] == [p.id for p in second["players"]]


def test_attendance_avoids_ungroupable_counts():
    config = RLGConfig(num_players=6, num_rounds=20, attendance_rate=0.6, seed=3)
    league = RandomLeagueGenerator(config).generate_complete_league()
    for snapshot in league["rounds"]:
        assert len(snapshot.present_player_ids) not in (0, 1, 5)


def test_json_export():
    config = RLGConfig(num_players=8, num_rounds=2, seed=1)
    rlg = RandomLeagueGenerator(config)
    payload = json.loads(rlg.export_json_format(rlg.generate_complete_league()))
    assert payload["config"]["score_pattern"] == "favourites"
    assert len(payload["players"]) == 8
    assert len(payload["rounds"]) == 2
    assert all("player_one_id" in m for m in payload["matches"])
