import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from aicloset.core.tags import WILDCARD_STYLE, normalize_category, normalize_style_key, normalize_weather
from aicloset.recs.matching import (
    SHORTS_CATEGORY,
    is_outerwear_category,
    is_shorts_or_skirts,
    is_umbrella,
    matches_style,
    matches_weather,
)
from aicloset.recs.types import FailureReason, Partition, Preferences, WardrobeItem

logger = logging.getLogger(__name__)


def filter_items_strict(items: Iterable[WardrobeItem], preferences: Preferences) -> List[WardrobeItem]:
    """Drop items whose style or weather tags exclude the request. Umbrellas survive rain."""
    target_style = normalize_style_key(preferences.occasion)
    target_weather = normalize_weather(preferences.weather)
    all_styles = target_style == WILDCARD_STYLE
    rainy = target_weather == "rainy"

    kept: List[WardrobeItem] = []
    for item in items:
        if rainy and is_umbrella(item):
            kept.append(item)
            continue
        if not all_styles and target_style and not matches_style(item, target_style):
            continue
        if not matches_weather(item, target_weather):
            continue
        kept.append(item)
    return kept


def partition_items(items: Iterable[WardrobeItem], rng: Optional[random.Random] = None) -> Partition:
    """Bucket items into wardrobe slots by category, then shuffle each slot."""
    rng = rng or random.Random()
    part = Partition()
    for item in items:
        c = normalize_category(item.category)
        if c == "top":
            part.tops.append(item)
        elif c == "bottom" or c == SHORTS_CATEGORY:
            part.bottoms.append(item)
        elif c == "dress":
            part.dresses.append(item)
        elif c == "footwear":
            part.footwear.append(item)
        elif is_outerwear_category(c):
            part.outerwear.append(item)
        elif c == "accessory" or is_umbrella(item):
            part.accessories.append(item)
        else:
            logger.debug("partition: dropping item=%s unknown category=%r", item.id, item.category)

    for bucket in (part.tops, part.bottoms, part.dresses, part.footwear, part.outerwear, part.accessories):
        rng.shuffle(bucket)

    logger.info("partition: %s", part.counts())
    return part


def apply_snowy_bottoms_filter(part: Partition, preferences: Preferences, min_non_short: int = 3) -> bool:
    """Remove shorts/skirts from bottoms in snow unless too few long bottoms remain.

    Mutates ``part.bottoms``. Returns True when the fallback kept shorts/skirts.
    """
    if preferences.weather != "Snowy":
        return False
    long_bottoms = [b for b in part.bottoms if not is_shorts_or_skirts(b)]
    excluded = len(part.bottoms) - len(long_bottoms)
    if excluded and len(long_bottoms) < min_non_short:
        logger.info(
            "snowy filter: fallback, only %s non-short bottoms; keeping %s shorts/skirts",
            len(long_bottoms),
            excluded,
        )
        return True
    part.bottoms = long_bottoms
    if excluded:
        logger.info("snowy filter: excluded %s shorts/skirts", excluded)
    return False


@dataclass(frozen=True)
class WardrobeCheck:
    valid: bool
    reason: Optional[FailureReason] = None
    message: Optional[str] = None


def validate_wardrobe(part: Partition) -> WardrobeCheck:
    if not part.footwear:
        return WardrobeCheck(
            False,
            FailureReason.NO_FOOTWEAR,
            "You need at least one pair of shoes to generate outfits.",
        )
    can_make_separates = bool(part.tops) and bool(part.bottoms)
    if not can_make_separates and not part.dresses:
        return WardrobeCheck(
            False,
            FailureReason.NO_BASE_GARMENTS,
            "You need either (Tops + Bottoms) OR (Dresses) to generate outfits.",
        )
    return WardrobeCheck(True)
