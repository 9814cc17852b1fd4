from aicloset.recs.config import RecsConfig
from aicloset.recs.pipeline import recommend
from aicloset.recs.types import (
    FailureReason,
    Outfit,
    OutfitHistory,
    Preferences,
    RecommendationResult,
    WardrobeItem,
)

__all__ = [
    "RecsConfig",
    "recommend",
    "FailureReason",
    "Outfit",
    "OutfitHistory",
    "Preferences",
    "RecommendationResult",
    "WardrobeItem",
]
