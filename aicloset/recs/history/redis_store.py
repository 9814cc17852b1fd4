import json
from typing import Optional

from redis import Redis

from aicloset.core.config import settings
from aicloset.recs.types import OutfitHistory


class RedisHistoryStore:
    def __init__(self, client: Optional[Redis] = None, prefix: Optional[str] = None) -> None:
        self._client = client
        self.prefix = prefix if prefix is not None else settings.HISTORY_KEY_PREFIX

    @property
    def client(self) -> Redis:
        if self._client is None:
            self._client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
        return self._client

    def load(self, key: str) -> OutfitHistory:
        raw = self.client.get(self.prefix + key)
        return OutfitHistory.from_dict(json.loads(raw)) if raw else OutfitHistory()

    def save(self, key: str, history: OutfitHistory) -> None:
        self.client.set(self.prefix + key, json.dumps(history.to_dict()))
