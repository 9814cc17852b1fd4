from __future__ import annotations
from typing import Protocol
from aicloset.llm.types import ItemAttributes, PredictRequest


class PredictionError(Exception):
    """Predictor unavailable or returned something unusable."""


class AttributePredictor(Protocol):
    async def predict(self, req: PredictRequest, *, timeout_ms: int) -> ItemAttributes:
        ...


class ProviderRegistry:
    _providers: dict[str, AttributePredictor] = {}

    @classmethod
    def register(cls, name: str, provider: AttributePredictor) -> None:
        cls._providers[name] = provider

    @classmethod
    def get(cls, name: str) -> AttributePredictor:
        if name not in cls._providers:
            raise ValueError(f"Unknown provider: {name}")
        return cls._providers[name]
