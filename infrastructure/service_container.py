"""
Object graph wiring for the shuffle service.

The HTTP app, the Discord bot and the tests all build their services here:

    container = ServiceContainer(ServiceConfig(db_path="ns2_stats.db"))
    container.initialize()
    app = create_app(container.shuffle_service)
"""

import logging
from dataclasses import dataclass, field

from config import DB_PATH, HISTORY_START_ROUND, SHUFFLER_SETTINGS
from domain.services.skill_model_service import SkillModelService
from infrastructure.schema_manager import SchemaManager
from repositories.history_repository import HistoryRepository
from services.shuffle_service import ShuffleService
from shuffler import BalancedShuffler

logger = logging.getLogger("ns2_shuffle.infrastructure.container")


def _setting(key: str):
    return field(default_factory=lambda: SHUFFLER_SETTINGS[key])


@dataclass
class ServiceConfig:
    """Everything needed to build the services; defaults come from config.py."""

    db_path: str = DB_PATH
    history_start_round: int = HISTORY_START_ROUND

    skill_window: int = _setting("skill_window")
    repeat_score_policy: str = _setting("repeat_score_policy")
    repeat_window: int = _setting("repeat_window")

    score_cutoff: float = _setting("score_cutoff")
    max_roster_size: int = _setting("max_roster_size")


class ServiceContainer:
    """
    Builds the repository, the skill model, the shuffler and the shuffle
    service in dependency order.

    Accessors return None until initialize() has run.
    """

    def __init__(self, config: ServiceConfig | None = None):
        self.config = config or ServiceConfig()
        self._history_repo: HistoryRepository | None = None
        self._skill_model: SkillModelService | None = None
        self._shuffle_service: ShuffleService | None = None

    @property
    def is_initialized(self) -> bool:
        return self._shuffle_service is not None

    def initialize(self) -> None:
        """Create the schema and wire the services. Safe to call more than once."""
        if self.is_initialized:
            logger.debug("ServiceContainer already initialized, skipping")
            return

        cfg = self.config
        logger.info(f"Initializing services (db={cfg.db_path}, history after round {cfg.history_start_round})")

        SchemaManager(cfg.db_path).initialize()
        self._history_repo = HistoryRepository(cfg.db_path)
        self._skill_model = SkillModelService(
            window=cfg.skill_window,
            repeat_policy=cfg.repeat_score_policy,
            repeat_window=cfg.repeat_window,
        )
        shuffler = BalancedShuffler(
            score_cutoff=cfg.score_cutoff,
            max_roster_size=cfg.max_roster_size,
        )
        self._shuffle_service = ShuffleService(
            history_repo=self._history_repo,
            skill_model=self._skill_model,
            shuffler=shuffler,
            since_round_id=cfg.history_start_round,
        )
        logger.info(
            f"Shuffle settings: window={cfg.skill_window}, repeat policy={cfg.repeat_score_policy}, "
            f"cutoff={cfg.score_cutoff}, max roster={cfg.max_roster_size}"
        )

    @property
    def history_repo(self) -> HistoryRepository | None:
        return self._history_repo

    @property
    def skill_model(self) -> SkillModelService | None:
        return self._skill_model

    @property
    def shuffle_service(self) -> ShuffleService | None:
        return self._shuffle_service

    def expose_to_bot(self, bot) -> None:
        """Attach services to the bot so cog setup() functions can find them."""
        bot.shuffle_service = self.shuffle_service
        logger.info("Services exposed to bot object")
