import hashlib
import json
from pathlib import Path

from aicloset.recs.types import OutfitHistory


class JsonFileHistoryStore:
    """One JSON document per key under ``directory``."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode()).hexdigest()[:32]
        return self.directory / f"{digest}.json"

    def load(self, key: str) -> OutfitHistory:
        path = self._path(key)
        if not path.exists():
            return OutfitHistory()
        with open(path, "r", encoding="utf-8") as f:
            return OutfitHistory.from_dict(json.load(f))

    def save(self, key: str, history: OutfitHistory) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(history.to_dict(), f)
        tmp.replace(path)
