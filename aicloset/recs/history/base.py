from typing import Protocol

from aicloset.recs.types import OutfitHistory


class HistoryStore(Protocol):
    def load(self, key: str) -> OutfitHistory:
        ...

    def save(self, key: str, history: OutfitHistory) -> None:
        ...
