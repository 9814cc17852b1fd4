from aicloset.recs.history.base import HistoryStore
from aicloset.recs.history.null import NullHistoryStore
from aicloset.recs.history.in_memory import InMemoryHistoryStore
from aicloset.recs.history.json_file import JsonFileHistoryStore
from aicloset.recs.history.redis_store import RedisHistoryStore

__all__ = [
    "HistoryStore",
    "NullHistoryStore",
    "InMemoryHistoryStore",
    "JsonFileHistoryStore",
    "RedisHistoryStore",
]
