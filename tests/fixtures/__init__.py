from .wardrobe_fixtures import (
    item,
    minimal_wardrobe,
    neutral_wardrobe,
    outerwear_pool,
    umbrellas,
)

__all__ = [
    "item",
    "minimal_wardrobe",
    "neutral_wardrobe",
    "outerwear_pool",
    "umbrellas",
]
