from pydantic import BaseModel

from aicloset.llm.types import ItemAttributes


class PredictMeta(BaseModel):
    provider: str
    fallback: bool = False
    latency_ms: int = 0


class PredictAttributesOut(BaseModel):
    attributes: ItemAttributes
    meta: PredictMeta
