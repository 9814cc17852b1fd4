import asyncio
import logging
from typing import Any, Optional

from aicloset.core.config import settings
from aicloset.llm.base import AttributePredictor, PredictionError
from aicloset.llm.normalize import extract_json_object, normalize_prediction
from aicloset.llm.prompt_templates import build_system_prompt, build_user_prompt
from aicloset.llm.types import ItemAttributes, PredictRequest

logger = logging.getLogger(__name__)


def _image_ref(req: PredictRequest) -> Optional[str]:
    if req.image_url:
        return req.image_url
    if req.image_b64:
        if req.image_b64.startswith("data:"):
            return req.image_b64
        return f"data:image/jpeg;base64,{req.image_b64}"
    return None


class OpenAIProvider(AttributePredictor):
    def __init__(self, client: Optional[Any] = None):
        self.client = client

    async def predict(self, req: PredictRequest, *, timeout_ms: int) -> ItemAttributes:
        image = _image_ref(req)
        if not image:
            raise PredictionError("image_url or image_b64 is required")

        async def _call():
            from openai import AsyncOpenAI

            client = self.client or AsyncOpenAI()
            resp = await client.chat.completions.create(
                model=settings.OPENAI_MODEL,
                messages=[
                    {"role": "system", "content": build_system_prompt()},
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": build_user_prompt(req.name_hint, req.category_hint)},
                            {"type": "image_url", "image_url": {"url": image, "detail": "auto"}},
                        ],
                    },
                ],
                temperature=0.2,
                max_tokens=settings.LLM_MAX_OUTPUT_TOKENS,
                response_format={"type": "json_object"},
            )
            return resp.choices[0].message.content

        try:
            content = await asyncio.wait_for(_call(), timeout=timeout_ms / 1000.0)
        except asyncio.TimeoutError as e:
            raise PredictionError("openai request timed out") from e
        except Exception as e:
            logger.warning("openai predict failed: %s", e)
            raise PredictionError(str(e) or "openai request failed") from e

        return normalize_prediction(extract_json_object(content), source="openai")
