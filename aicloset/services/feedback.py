import logging
import threading
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class FeedbackRecord:
    outfit_type: str
    footwear_id: str
    liked: bool
    top_id: Optional[str] = None
    bottom_id: Optional[str] = None
    dress_id: Optional[str] = None
    outerwear_id: Optional[str] = None
    requested_style: Optional[str] = None
    weather: Optional[str] = None
    features: List[float] = field(default_factory=list)
    rule_score: Optional[float] = None
    ml_score: Optional[float] = None
    final_score: Optional[float] = None
    constraints_met: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class FeedbackService:
    """Per-user like/dislike log kept in process memory."""

    def __init__(self) -> None:
        self._records: Dict[str, List[FeedbackRecord]] = defaultdict(list)
        self._lock = threading.Lock()

    def record(self, user_id: str, rec: FeedbackRecord) -> FeedbackRecord:
        with self._lock:
            self._records[user_id].append(rec)
        logger.info("feedback: user=%s type=%s liked=%s", user_id, rec.outfit_type, rec.liked)
        return rec

    def records(self, user_id: str) -> List[FeedbackRecord]:
        with self._lock:
            return list(self._records.get(user_id, []))

    def penalized_outerwear_ids(self, user_id: str) -> frozenset[str]:
        return frozenset(r.outerwear_id for r in self.records(user_id) if not r.liked and r.outerwear_id)

    def metrics(self, user_id: str) -> Dict[str, float]:
        recs = self.records(user_id)
        total = len(recs)
        likes = sum(1 for r in recs if r.liked)
        met = sum(1 for r in recs if r.constraints_met)
        return {
            "total_feedback": total,
            "total_likes": likes,
            "like_rate": (likes / total) * 100 if total else 0.0,
            "constraint_satisfaction": (met / total) * 100 if total else 100.0,
        }

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


feedback_service = FeedbackService()
