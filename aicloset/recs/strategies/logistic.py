import math
import random
from typing import List, Optional, Sequence

from aicloset.recs.colors import is_neutral
from aicloset.recs.matching import matches_style
from aicloset.recs.strategies.rules import is_weather_appropriate
from aicloset.recs.types import Outfit, Preferences

DEFAULT_WEIGHTS = (0.8, 0.3, 0.5, 0.6, 0.5, 0.4)


def extract_features(outfit: Outfit, preferences: Preferences) -> List[float]:
    """[style_match_count, neutral_count, has_contrast, weather_match, has_outerwear, is_dress]"""
    items = outfit.pieces()
    style_matches = sum(1 for item in items if matches_style(item, preferences.occasion))
    neutrals = sum(1 for item in items if is_neutral(item.color))
    contrast = 0
    if not outfit.is_dress:
        contrast = 1 if outfit.top.color != outfit.bottom.color else 0
    return [
        float(style_matches),
        float(neutrals),
        float(contrast),
        1.0 if is_weather_appropriate(outfit, preferences) else 0.0,
        1.0 if outfit.outerwear else 0.0,
        1.0 if outfit.is_dress else 0.0,
    ]


class LogisticStrategy:
    """Fixed-weight logistic model over the outfit feature vector."""

    name = "logistic"

    def __init__(
        self,
        weights: Sequence[float] = DEFAULT_WEIGHTS,
        bias: float = -2.0,
        jitter: float = 0.1,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.weights = tuple(weights)
        self.bias = bias
        self.jitter = jitter
        self.rng = rng or random.Random()

    def probability(self, features: Sequence[float]) -> float:
        z = self.bias + sum(w * x for w, x in zip(self.weights, features))
        # tie-break jitter, pre-sigmoid
        z += (self.rng.random() - 0.5) * self.jitter
        return 1.0 / (1.0 + math.exp(-z))

    def score(self, outfit: Outfit, preferences: Preferences) -> float:
        return self.probability(extract_features(outfit, preferences))
