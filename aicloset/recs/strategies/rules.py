from aicloset.core.tags import normalize_style_key
from aicloset.recs.colors import color_harmony_score
from aicloset.recs.matching import is_rain_footwear, is_rain_gear, is_umbrella, matches_style
from aicloset.recs.types import Outfit, Preferences

DRESS_OCCASIONS = {"formal", "party/dressy"}


def style_score(outfit: Outfit, occasion: str) -> int:
    """0-8 points: +2 per piece matching the occasion, +1 when the outfit sticks to two styles or fewer."""
    items = outfit.pieces()
    score = 2 * sum(1 for item in items if matches_style(item, occasion))

    styles = set()
    for item in items:
        for s in (item.styles if item.styles else [item.style]):
            key = normalize_style_key(s)
            if key:
                styles.add(key)
    if len(styles) <= 2 and len(items) >= 3:
        score += 1
    return min(score, 8)


def weather_score(outfit: Outfit, preferences: Preferences) -> int:
    score = 0
    if preferences.is_cold:
        score += 3 if outfit.outerwear else -2
    elif preferences.is_hot:
        score += 2 if not outfit.outerwear else -1
    elif preferences.is_rainy:
        if outfit.outerwear and is_rain_gear(outfit.outerwear):
            score += 3
        elif outfit.accessory and is_umbrella(outfit.accessory):
            score += 3
        elif is_rain_footwear(outfit.footwear):
            score += 2
        else:
            score += 1
    else:
        score += 1
    return max(0, min(score, 3))


def is_weather_appropriate(outfit: Outfit, preferences: Preferences) -> bool:
    if preferences.is_cold:
        return outfit.outerwear is not None
    if preferences.is_hot:
        return outfit.outerwear is None
    if preferences.is_rainy:
        return bool(
            (outfit.outerwear and is_rain_gear(outfit.outerwear))
            or (outfit.accessory and is_umbrella(outfit.accessory))
        )
    return False


class RuleBasedStrategy:
    """Hand-written 0-17 point score: style, colour harmony, weather fit and a dress bonus."""

    name = "rules"

    def score(self, outfit: Outfit, preferences: Preferences) -> float:
        total = style_score(outfit, preferences.occasion)
        total += color_harmony_score(item.color for item in outfit.pieces())
        total += weather_score(outfit, preferences)
        if outfit.is_dress and normalize_style_key(preferences.occasion) in DRESS_OCCASIONS:
            total += 1
        return float(total)
