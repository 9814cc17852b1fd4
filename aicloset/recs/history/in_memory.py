from aicloset.recs.types import OutfitHistory


class InMemoryHistoryStore:
    def __init__(self) -> None:
        self._data: dict[str, dict[str, list[str]]] = {}

    def load(self, key: str) -> OutfitHistory:
        return OutfitHistory.from_dict(self._data.get(key))

    def save(self, key: str, history: OutfitHistory) -> None:
        self._data[key] = history.to_dict()

    def clear(self) -> None:
        self._data.clear()
