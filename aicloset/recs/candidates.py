import logging
from typing import List

from aicloset.recs.colors import is_valid_color_combination
from aicloset.recs.types import Outfit, Partition

logger = logging.getLogger(__name__)


def generate_separates(part: Partition) -> List[Outfit]:
    out: List[Outfit] = []
    for top in part.tops:
        for bottom in part.bottoms:
            if not is_valid_color_combination(top.color, bottom.color):
                continue
            for shoe in part.footwear:
                out.append(Outfit.separates(top, bottom, shoe))
    return out


def generate_dress_outfits(part: Partition) -> List[Outfit]:
    return [Outfit.one_piece(dress, shoe) for dress in part.dresses for shoe in part.footwear]


def generate_candidates(part: Partition) -> List[Outfit]:
    """Cross product of tops x bottoms x footwear and dresses x footwear, colour-constrained."""
    separates = generate_separates(part)
    dresses = generate_dress_outfits(part)
    logger.info(
        "generated %s candidates (%s separates, %s dresses)",
        len(separates) + len(dresses),
        len(separates),
        len(dresses),
    )
    return separates + dresses
