import asyncio
import logging
import time
from typing import Dict, Optional

from aicloset.core.config import settings
from aicloset.llm.base import PredictionError, ProviderRegistry
from aicloset.llm.local_provider import HeuristicPredictor
from aicloset.llm.types import ItemAttributes, PredictRequest

logger = logging.getLogger(__name__)

_fallback = HeuristicPredictor()


async def predict_item_attributes(
    req: PredictRequest, provider_name: Optional[str] = None
) -> tuple[ItemAttributes, Dict]:
    name = provider_name or settings.LLM_PROVIDER
    provider = ProviderRegistry.get(name)
    timeout_ms = settings.LLM_PREDICT_TIMEOUT_MS
    start = time.perf_counter()
    fallback = False
    try:
        attrs = await asyncio.wait_for(
            provider.predict(req, timeout_ms=timeout_ms), timeout=timeout_ms / 1000.0 + 0.1
        )
    except (PredictionError, asyncio.TimeoutError) as e:
        logger.warning("predict: provider=%s failed (%s); using heuristics", name, str(e) or "timeout")
        attrs = _fallback.predict_sync(req)
        fallback = True
    latency_ms = int((time.perf_counter() - start) * 1000)
    meta = {"provider": name, "fallback": fallback, "latency_ms": latency_ms}
    return attrs, meta
