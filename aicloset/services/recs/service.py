import logging
import random
from typing import Iterable, Optional

from aicloset.core.config import settings
from aicloset.recs.config import RecsConfig
from aicloset.recs.history import (
    HistoryStore,
    InMemoryHistoryStore,
    JsonFileHistoryStore,
    NullHistoryStore,
    RedisHistoryStore,
)
from aicloset.recs.pipeline import recommend
from aicloset.recs.rotation import load_history, save_history, update_history
from aicloset.recs.types import Preferences, RecommendationResult, WardrobeItem

logger = logging.getLogger(__name__)


def build_history_store(provider: Optional[str] = None) -> HistoryStore:
    provider = (provider or settings.HISTORY_PROVIDER).lower()
    if provider == "redis":
        return RedisHistoryStore()
    if provider == "file":
        return JsonFileHistoryStore(settings.HISTORY_DIR)
    if provider == "none":
        return NullHistoryStore()
    return InMemoryHistoryStore()


class RecommendationService:
    def __init__(
        self,
        config: RecsConfig | None = None,
        store: HistoryStore | None = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or RecsConfig()
        self.store = store or build_history_store()
        self.seed = seed if seed is not None else settings.RECS_SEED

    def _rng(self) -> random.Random:
        # per-call generator; no shared state between requests
        return random.Random(self.seed)

    def recommend_outfits(
        self, user_id: str, items: Iterable[WardrobeItem], preferences: Preferences
    ) -> RecommendationResult:
        history = load_history(self.store, user_id)
        result = recommend(items, preferences, history, config=self.config, rng=self._rng())
        if result.success and result.outfits:
            save_history(self.store, user_id, update_history(history, result.outfits, self.config))
        if not result.success:
            logger.info("recommend: user=%s failed reason=%s", user_id, result.reason.value)
        return result
