from typing import Optional

from aicloset.core.taxonomy import allowed_values, category_keywords, style_keywords
from aicloset.llm.base import AttributePredictor
from aicloset.llm.normalize import canonical_color
from aicloset.llm.types import ItemAttributes, PredictRequest
from aicloset.services.color_detection import detect_dominant_color_b64


class HeuristicPredictor(AttributePredictor):
    """Keyword matching over the filename and name, plus pixel colour when an image is supplied."""

    async def predict(self, req: PredictRequest, *, timeout_ms: int = 0) -> ItemAttributes:
        return self.predict_sync(req)

    def predict_sync(self, req: PredictRequest) -> ItemAttributes:
        name_hint = (req.name_hint or "").strip()
        text = f"{req.filename or ''} {name_hint}".lower()
        confidence = 0.0
        tags: list[str] = []

        category: Optional[str] = None
        if req.category_hint:
            category = canonical_category_hint(req.category_hint)
            if category:
                confidence = 1.0
        if category is None:
            for cat, keywords in category_keywords().items():
                hit = next((k for k in keywords if k in text), None)
                if hit:
                    category = cat
                    confidence = 0.7
                    tags.append(hit)
                    break

        color = ""
        for c in allowed_values("color"):
            if c.lower() in text:
                color = c
                confidence = max(confidence, 0.8)
                break
        if not color and req.image_b64:
            color = canonical_color(detect_dominant_color_b64(req.image_b64))
            if color:
                tags.append("pixel color")
                confidence = max(confidence, 0.5)

        styles = [s for s, keywords in style_keywords().items() if any(k in text for k in keywords)]
        if styles:
            confidence = max(confidence, 0.6)

        name = name_hint
        if not name and color and category:
            garment = category
            for keywords in category_keywords().values():
                match = next((k for k in keywords if k in text), None)
                if match:
                    garment = match[:1].upper() + match[1:]
                    break
            name = f"{color} {garment}"
            confidence = max(confidence, 0.5)

        filled = sum(1 for f in (category, color, styles) if f)
        if filled == 0:
            confidence = 0.0
        elif filled >= 2:
            confidence = max(confidence, 0.85)

        return ItemAttributes(
            name=name,
            category=category,
            color=color,
            styles=styles,
            weather=[],
            confidence=confidence,
            reasoning_tags=tags,
            source="heuristic",
        )


def canonical_category_hint(hint: str) -> Optional[str]:
    lowered = hint.strip().lower().replace(" ", "")
    for c in allowed_values("category"):
        if c.lower().replace(" ", "") == lowered:
            return c
    return None
