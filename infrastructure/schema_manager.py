"""
Schema and migration management for the SQLite round-history database.
"""

import logging
import sqlite3
from contextlib import closing

logger = logging.getLogger("ns2_shuffle.schema")

BASE_TABLES = (
    """
    CREATE TABLE IF NOT EXISTS PlayerStats (
        steamId INTEGER PRIMARY KEY,
        playerName TEXT NOT NULL,
        hiveSkill INTEGER NOT NULL DEFAULT 0,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS RoundInfo (
        roundId INTEGER PRIMARY KEY,
        winningTeam INTEGER NOT NULL,
        mapName TEXT,
        roundLength REAL,
        roundDate TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS PlayerRoundStats (
        roundId INTEGER NOT NULL,
        steamId INTEGER NOT NULL,
        playerName TEXT NOT NULL,
        lastTeam INTEGER NOT NULL,
        FOREIGN KEY (roundId) REFERENCES RoundInfo(roundId),
        FOREIGN KEY (steamId) REFERENCES PlayerStats(steamId),
        PRIMARY KEY (roundId, steamId)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS schema_migrations (
        name TEXT PRIMARY KEY,
        applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
)


class SchemaManager:
    """
    Creates the NS2 round stats tables and applies named migrations.

    One row per round lives in RoundInfo, one row per player per round in
    PlayerRoundStats, and each player's current hive skill in PlayerStats.
    Applied migrations are recorded in schema_migrations so initialize() is
    safe to call on every startup.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path

    def initialize(self) -> None:
        """Ensure the base tables exist, then apply pending migrations."""
        logger.info(f"Initializing database schema: {self.db_path}")
        with closing(sqlite3.connect(self.db_path)) as conn:
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA busy_timeout=5000")
            for statement in BASE_TABLES:
                conn.execute(statement)
            applied = self._migrate(conn)
            conn.commit()
        if applied:
            logger.info(f"Applied {len(applied)} migration(s): {', '.join(applied)}")

    def _migrate(self, conn: sqlite3.Connection) -> list[str]:
        done = {name for (name,) in conn.execute("SELECT name FROM schema_migrations")}
        applied = []
        for name, migration in self._migrations():
            if name in done:
                continue
            logger.debug(f"Applying migration: {name}")
            migration(conn)
            conn.execute("INSERT INTO schema_migrations (name) VALUES (?)", (name,))
            applied.append(name)
        return applied

    def _migrations(self):
        # Append only; names are recorded in schema_migrations
        return [
            ("add_history_indexes_v1", self._add_history_indexes),
        ]

    # --- Migrations ---

    def _add_history_indexes(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_player_round_stats_steam_round "
            "ON PlayerRoundStats(steamId, roundId)"
        )
        conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_player_round_stats_round ON PlayerRoundStats(roundId)"
        )
