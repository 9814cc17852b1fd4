import logging
import random
from dataclasses import replace
from typing import List, Optional, Sequence

from aicloset.recs.config import RecsConfig
from aicloset.recs.matching import is_shorts_or_skirts
from aicloset.recs.strategies.logistic import LogisticStrategy, extract_features
from aicloset.recs.strategies.base import Strategy
from aicloset.recs.strategies.rules import RuleBasedStrategy
from aicloset.recs.types import Outfit, OutfitHistory, Preferences

logger = logging.getLogger(__name__)


class HybridScorer:
    """Blend the rule score with the logistic probability, then apply rotation penalties."""

    def __init__(self, config: Optional[RecsConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or RecsConfig()
        self.rng = rng or random.Random()
        self.rules: Strategy = RuleBasedStrategy()
        self.model = LogisticStrategy(
            weights=self.config.ml_weights,
            bias=self.config.ml_bias,
            jitter=self.config.ml_jitter,
            rng=self.rng,
        )

    def blend(self, rule_score: float, ml_score: float) -> float:
        cfg = self.config
        return cfg.rule_weight * (rule_score / cfg.rule_score_max) + cfg.ml_weight * ml_score

    def score_one(
        self,
        outfit: Outfit,
        preferences: Preferences,
        history: OutfitHistory,
        non_short_bottoms: int,
    ) -> Outfit:
        cfg = self.config
        rule_score = self.rules.score(outfit, preferences)
        features = extract_features(outfit, preferences)
        ml_score = self.model.probability(features)
        scored = replace(outfit, rule_score=rule_score, ml_score=ml_score, features=features)

        if outfit.full_id in history.recent_full_outfit_ids:
            scored.score = cfg.kill_score
            return scored

        penalty = 0.0
        if outfit.key_item_id in history.recent_key_item_ids:
            penalty -= cfg.repeat_key_item_penalty
        if self.cold_shorts_applies(outfit, preferences, non_short_bottoms):
            penalty -= cfg.cold_shorts_penalty

        jitter = (self.rng.random() - 0.5) * cfg.score_jitter
        scored.score = self.blend(rule_score, ml_score) + penalty + jitter
        return scored

    def cold_shorts_applies(self, outfit: Outfit, preferences: Preferences, non_short_bottoms: int) -> bool:
        return (
            preferences.weather == "Cold"
            and not outfit.is_dress
            and is_shorts_or_skirts(outfit.bottom)
            and non_short_bottoms >= self.config.min_non_short_bottoms
        )

    def score_and_rank(
        self,
        candidates: Sequence[Outfit],
        preferences: Preferences,
        history: OutfitHistory,
        non_short_bottoms: int,
    ) -> List[Outfit]:
        ranked = [self.score_one(c, preferences, history, non_short_bottoms) for c in candidates]
        ranked.sort(key=lambda o: o.score, reverse=True)

        cold_hits = sum(1 for c in candidates if self.cold_shorts_applies(c, preferences, non_short_bottoms))
        if cold_hits:
            logger.info("score: cold penalty applied to %s shorts/skirts outfits", cold_hits)
        killed = sum(1 for o in ranked if o.score <= self.config.kill_threshold)
        if killed:
            logger.info("score: %s of %s candidates repeat a recent full outfit", killed, len(ranked))
        return ranked
