"""Single-request outfit pipeline.

filter -> partition -> snowy pre-filter -> validate -> candidates -> score
-> diversity selection -> outerwear/accessory attachment

Every stage takes and returns plain data; the caller owns the rotation history.
"""

import logging
import random
from typing import Iterable, Optional

from aicloset.recs.attach import attach_outerwear_and_accessories
from aicloset.recs.candidates import generate_candidates
from aicloset.recs.config import RecsConfig
from aicloset.recs.filters import (
    apply_snowy_bottoms_filter,
    filter_items_strict,
    partition_items,
    validate_wardrobe,
)
from aicloset.recs.matching import is_shorts_or_skirts
from aicloset.recs.scoring import HybridScorer
from aicloset.recs.strategies.diversity import DiversityStrategy
from aicloset.recs.types import (
    FailureReason,
    OutfitHistory,
    Preferences,
    RecommendationResult,
    WardrobeItem,
)

logger = logging.getLogger(__name__)


def recommend(
    items: Iterable[WardrobeItem],
    preferences: Preferences,
    history: Optional[OutfitHistory] = None,
    *,
    config: Optional[RecsConfig] = None,
    rng: Optional[random.Random] = None,
) -> RecommendationResult:
    config = config or RecsConfig()
    rng = rng or random.Random()
    history = history or OutfitHistory()
    items = list(items)

    filtered = filter_items_strict(items, preferences)
    logger.info(
        "recommend: weather=%s occasion=%s items=%s filtered=%s",
        preferences.weather,
        preferences.occasion,
        len(items),
        len(filtered),
    )

    part = partition_items(filtered, rng)
    apply_snowy_bottoms_filter(part, preferences, config.min_non_short_bottoms)

    check = validate_wardrobe(part)
    if not check.valid:
        return RecommendationResult.fail(
            check.reason,
            f"Not enough items match your criteria ({preferences.weather}, {preferences.occasion}). {check.message}",
        )

    candidates = generate_candidates(part)
    if not candidates:
        return RecommendationResult.fail(
            FailureReason.NO_MATCHING_OUTFITS,
            f'No outfits found for "{preferences.occasion}" in "{preferences.weather}" weather.',
        )

    non_short_bottoms = sum(1 for b in part.bottoms if not is_shorts_or_skirts(b))
    scorer = HybridScorer(config, rng)
    ranked = scorer.score_and_rank(candidates, preferences, history, non_short_bottoms)

    selector = DiversityStrategy(config.pool_size, config.batch_size, config.kill_threshold)
    finalists = selector.select(ranked)
    if not finalists:
        logger.warning("recommend: every candidate repeats a recent outfit; returning an empty batch")

    outfits = attach_outerwear_and_accessories(
        finalists, part.outerwear, part.accessories, preferences, history, config
    )
    return RecommendationResult.ok(outfits)
