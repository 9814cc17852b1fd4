"""Second pass: outerwear and weather accessories for the chosen batch.

Runs once per batch so outerwear can be kept unique across finalists.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from aicloset.recs.colors import is_valid_color_combination
from aicloset.recs.config import RecsConfig
from aicloset.recs.matching import is_umbrella
from aicloset.recs.types import Outfit, OutfitHistory, Preferences, WardrobeItem

logger = logging.getLogger(__name__)


def outerwear_score(
    outfit: Outfit,
    outer: WardrobeItem,
    *,
    pool_size: int,
    history: OutfitHistory,
    preferences: Preferences,
    config: RecsConfig,
) -> float:
    score = config.outer_eligible_bonus
    if is_valid_color_combination(outfit.key_item.color, outer.color):
        score += config.outer_color_bonus

    recent = history.recent_outerwear_ids
    blocked_window = 2 if pool_size >= 5 else 1 if pool_size >= 3 else 0
    if outer.id in recent[:blocked_window]:
        score -= config.outer_block_penalty

    if outer.id in recent:
        idx = recent.index(outer.id)
        recency = max(0.0, 1 - idx / config.outer_recency_window)
        score -= config.outer_recency_base + config.outer_recency_scale * recency

    if pool_size >= config.outer_dislike_min_pool and outer.id in preferences.penalized_ids:
        score -= config.outer_dislike_penalty
    return score


def rank_outerwear(
    outfit: Outfit,
    pool: Sequence[WardrobeItem],
    history: OutfitHistory,
    preferences: Preferences,
    config: RecsConfig,
) -> List[WardrobeItem]:
    scored = [
        (
            outerwear_score(
                outfit, outer, pool_size=len(pool), history=history, preferences=preferences, config=config
            ),
            outer,
        )
        for outer in pool
    ]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [outer for _, outer in scored]


def pick_accessory(
    accessories: Sequence[WardrobeItem], preferences: Preferences, position: int
) -> Optional[WardrobeItem]:
    """Umbrella is mandatory in rain when one is available; otherwise no accessory."""
    if not preferences.is_rainy:
        return None
    umbrellas = [a for a in accessories if is_umbrella(a)]
    if not umbrellas:
        return None
    return umbrellas[position % len(umbrellas)]


def attach_outerwear_and_accessories(
    finalists: Sequence[Outfit],
    outerwear: Sequence[WardrobeItem],
    accessories: Sequence[WardrobeItem],
    preferences: Preferences,
    history: OutfitHistory,
    config: Optional[RecsConfig] = None,
) -> List[Outfit]:
    config = config or RecsConfig()
    used: set[str] = set()
    logger.info(
        "attach: %s finalists, outerwear pool=%s, penalized=%s",
        len(finalists),
        [o.id for o in outerwear],
        len(preferences.penalized_ids),
    )

    result: List[Outfit] = []
    for position, outfit in enumerate(finalists):
        ranked = rank_outerwear(outfit, outerwear, history, preferences, config)
        chosen = next((o for o in ranked if o.id not in used), None)
        if chosen is not None:
            used.add(chosen.id)
        elif ranked:
            chosen = ranked[0]
            logger.warning("attach: #%s outerwear pool exhausted, reusing %s", position + 1, chosen.id)

        if chosen is None and preferences.is_cold:
            logger.warning("attach: #%s no eligible outerwear for %s weather", position + 1, preferences.weather)

        accessory = pick_accessory(accessories, preferences, position)
        result.append(replace(outfit, outerwear=chosen, accessory=accessory))
    return result
