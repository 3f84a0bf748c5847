"""
Round history data access.
"""

import logging
import sqlite3
from collections.abc import Sequence

from domain.models.faction import Faction
from domain.models.round import Round
from repositories.base_repository import BaseRepository
from repositories.exceptions import HistoryUnavailableError
from repositories.interfaces import IHistoryRepository

logger = logging.getLogger("ns2_shuffle.repositories.history")

# Only faction teams count; spectators and ready room rows are skipped
ROUNDS_QUERY = """
    SELECT prs.roundId AS round_id,
           prs.steamId AS player_id,
           ps.hiveSkill AS skill,
           prs.playerName AS player_name,
           prs.lastTeam AS team,
           CASE WHEN prs.lastTeam = ri.winningTeam THEN 1 ELSE 0 END AS win
    FROM PlayerRoundStats prs
    INNER JOIN RoundInfo ri ON ri.roundId = prs.roundId
    INNER JOIN PlayerStats ps ON ps.steamId = prs.steamId
    WHERE ri.roundId > ?
      AND prs.lastTeam IN (1, 2)
    ORDER BY prs.roundId ASC, prs.steamId ASC
"""


class HistoryRepository(BaseRepository, IHistoryRepository):
    """Reads and records NS2 round participation."""

    def get_rounds(self, since_round_id: int = 0) -> list[Round]:
        """
        Read every player-round after since_round_id.

        Returns:
            Rounds ordered oldest to newest

        Raises:
            HistoryUnavailableError: If the database cannot be queried
        """
        try:
            with self.cursor() as cursor:
                cursor.execute(ROUNDS_QUERY, (since_round_id,))
                rows = cursor.fetchall()
        except sqlite3.Error as exc:
            logger.error(f"Failed to read round history from {self.db_path}: {exc}", exc_info=True)
            raise HistoryUnavailableError(self.db_path, exc) from exc

        return [
            Round(
                round_id=row["round_id"],
                player_id=row["player_id"],
                skill=row["skill"],
                player_name=row["player_name"],
                faction=Faction(row["team"]),
                win=row["win"],
            )
            for row in rows
        ]

    def upsert_player(self, player_id: int, name: str, skill: int) -> None:
        """Insert or update a player's current name and hive skill."""
        with self.cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO PlayerStats (steamId, playerName, hiveSkill)
                VALUES (?, ?, ?)
                ON CONFLICT(steamId) DO UPDATE SET
                    playerName = excluded.playerName,
                    hiveSkill = excluded.hiveSkill,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (player_id, name, skill),
            )

    def record_round(
        self,
        round_id: int,
        winning_team: int,
        participants: Sequence[tuple[int, str, int]],
        map_name: str | None = None,
    ) -> None:
        """
        Store a finished round and its participants atomically.

        Args:
            round_id: Round identifier
            winning_team: Team number that won (1 = Marine, 2 = Alien)
            participants: (player id, player name, team) per participant
            map_name: Optional map name
        """
        with self.cursor() as cursor:
            cursor.execute(
                "INSERT INTO RoundInfo (roundId, winningTeam, mapName) VALUES (?, ?, ?)",
                (round_id, winning_team, map_name),
            )
            cursor.executemany(
                """
                INSERT INTO PlayerRoundStats (roundId, steamId, playerName, lastTeam)
                VALUES (?, ?, ?, ?)
                """,
                [(round_id, player_id, name, team) for player_id, name, team in participants],
            )
