from typing import Iterable, Optional

from aicloset.core.taxonomy import neutral_colors


def is_neutral(color: Optional[str]) -> bool:
    c = (color or "").lower()
    return bool(c) and any(n.lower() in c for n in neutral_colors())


def is_valid_color_combination(color1: Optional[str], color2: Optional[str]) -> bool:
    """Neutrals go with anything; two accent colours must differ.

    A missing colour never blocks a pairing.
    """
    if not color1 or not color2:
        return True
    if is_neutral(color1) or is_neutral(color2):
        return True
    return (color1 or "") != (color2 or "")


def color_harmony_score(colors: Iterable[Optional[str]]) -> int:
    """0-6 points: reward a neutral base and at most one accent, punish three or more accents."""
    present = [c for c in colors if c]
    neutral_count = sum(1 for c in present if is_neutral(c))
    unique_accents = len({c for c in present if not is_neutral(c)})

    score = 0
    if neutral_count >= 1:
        score += 2
    if unique_accents <= 1 and neutral_count >= 1:
        score += 2
    elif unique_accents == 0:
        score += 2
    elif unique_accents >= 3:
        score -= 2
    return max(0, min(score, 6))
