import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from aicloset.core.taxonomy import allowed_values, color_aliases
from aicloset.core.tags import normalize_style_key
from aicloset.llm.base import PredictionError
from aicloset.llm.types import ItemAttributes

logger = logging.getLogger(__name__)

UNKNOWN_COLOR_MAX_CONFIDENCE = 0.4
DEFAULT_CONFIDENCE = 0.5


def extract_json_object(content: Optional[str]) -> Dict[str, Any]:
    """Parse the text between the first "{" and the last "}"."""
    if not content:
        raise PredictionError("empty response")
    start = content.find("{")
    end = content.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise PredictionError("response did not contain a JSON object")
    try:
        data = json.loads(content[start : end + 1])
    except json.JSONDecodeError as e:
        raise PredictionError(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PredictionError("response JSON is not an object")
    return data


def canonical_color(raw: Any) -> str:
    if not isinstance(raw, str):
        return ""
    lower = raw.strip().lower()
    if not lower:
        return ""
    for c in allowed_values("color"):
        if c.lower() == lower:
            return c
    return color_aliases().get(lower, "")


def _as_list(v: Any) -> List[Any]:
    if isinstance(v, list):
        return v
    if isinstance(v, str):
        return [v]
    return []


def _canonical(values: List[Any], facet: str) -> List[str]:
    lookup = {normalize_style_key(v): v for v in allowed_values(facet)}
    out: List[str] = []
    for v in values:
        if not isinstance(v, str):
            continue
        hit = lookup.get(normalize_style_key(v))
        if hit and hit not in out:
            out.append(hit)
    return out


def _canonical_category(raw: Any) -> Optional[str]:
    if not isinstance(raw, str) or not raw.strip():
        return None
    hits = _canonical([raw], "category")
    return hits[0] if hits else raw.strip()


def _confidence(raw: Any) -> float:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    try:
        return float(raw)
    except (TypeError, ValueError):
        return DEFAULT_CONFIDENCE


def normalize_prediction(data: Dict[str, Any], source: str = "openai") -> ItemAttributes:
    raw_color = data.get("color").strip() if isinstance(data.get("color"), str) else ""
    color = canonical_color(raw_color)
    confidence = _confidence(data.get("confidence"))
    if raw_color and not color:
        confidence = min(confidence, UNKNOWN_COLOR_MAX_CONFIDENCE)

    category = _canonical_category(data.get("category")) or "Top"
    name = data.get("name").strip() if isinstance(data.get("name"), str) else ""
    if not name:
        name = f"{color} {category}" if color else category

    tags = [t for t in _as_list(data.get("reasoning_tags")) if isinstance(t, str)]

    try:
        return ItemAttributes(
            name=name,
            category=category,
            color=color,
            styles=_canonical(_as_list(data.get("styles")), "occasion"),
            weather=_canonical(_as_list(data.get("weather")), "weather"),
            confidence=confidence,
            reasoning_tags=tags,
            source=source,
        )
    except ValidationError as e:
        logger.warning("prediction failed validation: %s", e.errors())
        raise PredictionError("invalid prediction structure") from e
