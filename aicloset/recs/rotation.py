"""Rotation history bookkeeping around a best-effort store."""

import logging
from typing import Optional, Sequence

from aicloset.recs.config import RecsConfig
from aicloset.recs.history.base import HistoryStore
from aicloset.recs.types import Outfit, OutfitHistory

logger = logging.getLogger(__name__)


def load_history(store: HistoryStore, key: str) -> OutfitHistory:
    try:
        return store.load(key)
    except Exception as e:
        logger.warning("history: load failed key=%s reason=%s; starting empty", key, e)
        return OutfitHistory()


def update_history(
    history: OutfitHistory, outfits: Sequence[Outfit], config: Optional[RecsConfig] = None
) -> OutfitHistory:
    """Prepend the batch (last outfit ends up newest) and truncate to the caps."""
    config = config or RecsConfig()
    full_ids = list(history.recent_full_outfit_ids)
    key_ids = list(history.recent_key_item_ids)
    outer_ids = list(history.recent_outerwear_ids)
    for outfit in outfits:
        full_ids.insert(0, outfit.full_id)
        key_ids.insert(0, outfit.key_item_id)
        if outfit.outerwear:
            outer_ids.insert(0, outfit.outerwear.id)
    return OutfitHistory(
        recent_full_outfit_ids=full_ids[: config.max_full_outfit_ids],
        recent_key_item_ids=key_ids[: config.max_key_item_ids],
        recent_outerwear_ids=outer_ids[: config.max_outerwear_ids],
    )


def save_history(store: HistoryStore, key: str, history: OutfitHistory) -> bool:
    try:
        store.save(key, history)
        return True
    except Exception as e:
        logger.warning("history: save failed key=%s reason=%s", key, e)
        return False
