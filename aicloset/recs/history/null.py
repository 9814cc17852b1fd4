from aicloset.recs.types import OutfitHistory


class NullHistoryStore:
    """Used when no persistence is available: every request starts from an empty history."""

    def load(self, key: str) -> OutfitHistory:
        return OutfitHistory()

    def save(self, key: str, history: OutfitHistory) -> None:
        return None
