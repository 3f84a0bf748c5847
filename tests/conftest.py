"""
Pytest fixtures for tests.

Uses a session-scoped schema template so the migrations run once and each
test copies the resulting database file instead of re-initializing it.
"""

import shutil

import pytest

from domain.models.faction import Faction
from domain.models.player import FactionStats, Player
from domain.models.round import Round
from domain.services.skill_model_service import SkillModelService
from infrastructure.schema_manager import SchemaManager
from repositories.history_repository import HistoryRepository
from services.shuffle_service import ShuffleService
from shuffler import BalancedShuffler

# =============================================================================
# CENTRALIZED CONSTANTS
# =============================================================================

TEST_START_ROUND = 0
"""History start used by service fixtures so every seeded round is read."""


def make_round(round_id, player_id, faction=Faction.MARINE, win=0, skill=1000, name=None):
    """Build a Round with sensible defaults."""
    return Round(
        round_id=round_id,
        player_id=player_id,
        skill=skill,
        player_name=name or f"Player{player_id}",
        faction=Faction(faction),
        win=win,
    )


def make_player(player_id, skill=1000, marine=None, alien=None, name=None):
    """Build a Player; faction stats default to neutral."""
    return Player(
        player_id=player_id,
        name=name or f"Player{player_id}",
        skill=skill,
        marine=marine or FactionStats(),
        alien=alien or FactionStats(),
    )


@pytest.fixture(scope="session")
def _schema_template_path(tmp_path_factory):
    """
    Create a schema template database once per test session.

    Tests copy from this template instead of running schema initialization each time.
    """
    template_dir = tmp_path_factory.mktemp("schema_template")
    template_path = str(template_dir / "template.db")
    SchemaManager(template_path).initialize()
    yield template_path


@pytest.fixture
def temp_db_path(tmp_path):
    """Create a temporary database path (no schema)."""
    path = str(tmp_path / "temp.db")
    yield path


@pytest.fixture
def repo_db_path(_schema_template_path, tmp_path):
    """Create a temporary database with initialized schema for repository tests."""
    test_db_path = str(tmp_path / "test.db")
    shutil.copy2(_schema_template_path, test_db_path)
    yield test_db_path


@pytest.fixture
def history_repo(repo_db_path):
    """Create a history repository with temp database."""
    return HistoryRepository(repo_db_path)


@pytest.fixture
def seed_round(history_repo):
    """
    Record a finished round.

    Usage:
        seed_round(2000, winning_team=1, marines=[1, 2], aliens=[3, 4])
    """

    def _seed(round_id, winning_team, marines=(), aliens=(), spectators=(), skills=None):
        skills = skills or {}
        participants = (
            [(pid, f"Player{pid}", 1) for pid in marines]
            + [(pid, f"Player{pid}", 2) for pid in aliens]
            + [(pid, f"Player{pid}", 3) for pid in spectators]
        )
        for pid, name, _team in participants:
            history_repo.upsert_player(pid, name, skills.get(pid, 1000))
        history_repo.record_round(round_id, winning_team, participants)

    return _seed


@pytest.fixture
def sample_players():
    """Four players with neutral history and equal skill."""
    return [make_player(pid, skill=100) for pid in (1, 2, 3, 4)]


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def skill_model():
    return SkillModelService(window=30, repeat_policy="streak")


@pytest.fixture
def shuffler():
    return BalancedShuffler(score_cutoff=100.0, max_roster_size=20)


@pytest.fixture
def shuffle_service(history_repo, skill_model, shuffler):
    """Shuffle service backed by a temp database."""
    return ShuffleService(
        history_repo=history_repo,
        skill_model=skill_model,
        shuffler=shuffler,
        since_round_id=TEST_START_ROUND,
    )
