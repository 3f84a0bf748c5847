"""
Tests for HistoryRepository.
"""

import sqlite3

import pytest

from domain.models.faction import Faction
from repositories.exceptions import HistoryUnavailableError, RepositoryError
from repositories.history_repository import HistoryRepository


def test_empty_history(history_repo):
    assert history_repo.get_rounds() == []


def test_rounds_are_ordered_oldest_first(history_repo, seed_round):
    seed_round(3000, winning_team=1, marines=[2], aliens=[1])
    seed_round(2000, winning_team=2, marines=[1], aliens=[2])

    rounds = history_repo.get_rounds()

    assert [(r.round_id, r.player_id) for r in rounds] == [
        (2000, 1),
        (2000, 2),
        (3000, 1),
        (3000, 2),
    ]


def test_win_is_derived_from_winning_team(history_repo, seed_round):
    seed_round(2000, winning_team=2, marines=[1], aliens=[2])

    by_player = {r.player_id: r for r in history_repo.get_rounds()}

    assert by_player[1].faction == Faction.MARINE
    assert by_player[1].win == 0
    assert by_player[2].faction == Faction.ALIEN
    assert by_player[2].won is True


def test_rounds_before_start_are_skipped(history_repo, seed_round):
    seed_round(1933, winning_team=1, marines=[1], aliens=[2])
    seed_round(1934, winning_team=1, marines=[1], aliens=[2])

    rounds = history_repo.get_rounds(since_round_id=1933)

    assert {r.round_id for r in rounds} == {1934}


def test_spectators_are_skipped(history_repo, seed_round):
    seed_round(2000, winning_team=1, marines=[1], aliens=[2], spectators=[3])

    assert {r.player_id for r in history_repo.get_rounds()} == {1, 2}


def test_skill_and_name_come_from_player_stats(history_repo, seed_round):
    seed_round(2000, winning_team=1, marines=[1], aliens=[2], skills={1: 1750})
    history_repo.upsert_player(1, "Renamed", 1800)

    round_ = next(r for r in history_repo.get_rounds() if r.player_id == 1)

    assert round_.skill == 1800
    # Name is the one recorded for the round
    assert round_.player_name == "Player1"


def test_upsert_player_updates_existing(history_repo):
    history_repo.upsert_player(1, "Skulk", 900)
    history_repo.upsert_player(1, "Onos", 2100)

    with history_repo.cursor() as cursor:
        cursor.execute("SELECT playerName, hiveSkill FROM PlayerStats WHERE steamId = 1")
        row = cursor.fetchone()

    assert row["playerName"] == "Onos"
    assert row["hiveSkill"] == 2100


def test_duplicate_round_is_rolled_back(history_repo, seed_round):
    seed_round(2000, winning_team=1, marines=[1], aliens=[2])

    with pytest.raises(sqlite3.IntegrityError):
        history_repo.record_round(2000, 2, [(3, "Player3", 1)])

    assert {r.player_id for r in history_repo.get_rounds()} == {1, 2}


def test_unreadable_database_raises_history_unavailable(tmp_path):
    repo = HistoryRepository(str(tmp_path / "stats.db"))
    with repo.cursor() as cursor:
        cursor.execute("DROP TABLE PlayerRoundStats")

    with pytest.raises(HistoryUnavailableError) as exc_info:
        repo.get_rounds()

    assert isinstance(exc_info.value, RepositoryError)
    assert exc_info.value.db_path == repo.db_path
