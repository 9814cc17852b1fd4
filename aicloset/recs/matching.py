"""Style, weather and special-item predicates shared by every pipeline stage."""

from typing import Optional

from aicloset.core.tags import (
    WILDCARD_STYLE,
    mentions,
    normalize_category,
    normalize_style_key,
    normalize_weather,
)
from aicloset.core.taxonomy import rain_gear_keywords
from aicloset.recs.types import WardrobeItem

OUTERWEAR_ALIASES = ("outerwear", "jacket", "coat")
SHORTS_CATEGORY = "shorts/skirts"


def item_styles(item: WardrobeItem) -> list[str]:
    styles: list[str] = []
    for raw in ([item.style] if item.style else []) + list(item.styles):
        key = normalize_style_key(raw)
        if key and key not in styles:
            styles.append(key)
    return styles


def matches_style(item: WardrobeItem, target_style: Optional[str]) -> bool:
    target = normalize_style_key(target_style)
    if not target or target == WILDCARD_STYLE:
        return True
    return any(s == target or s == WILDCARD_STYLE for s in item_styles(item))


def matches_weather(item: WardrobeItem, target_weather: Optional[str]) -> bool:
    target = normalize_weather(target_weather)
    if not target or not item.weather:
        return True
    return any(normalize_weather(w) == target for w in item.weather)


def is_umbrella(item: WardrobeItem) -> bool:
    return mentions(("umbrella",), item.name, item.tags)


def is_rain_gear(item: WardrobeItem) -> bool:
    return mentions(rain_gear_keywords(), item.name, item.tags)


def is_rain_footwear(item: WardrobeItem) -> bool:
    return "boot" in item.category.lower() or "boot" in item.name.lower() or is_rain_gear(item)


def is_outerwear_category(category: Optional[str]) -> bool:
    c = normalize_category(category)
    return c == "outerwear" or "jacket" in c or "coat" in c


def is_shorts_or_skirts(item: WardrobeItem) -> bool:
    if normalize_category(item.category) == SHORTS_CATEGORY:
        return True
    return mentions(("short", "skirt"), item.name, item.tags)
