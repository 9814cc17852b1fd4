from typing import List, Optional, Sequence

from aicloset.recs.types import Outfit


class DiversityStrategy:
    """Greedy batch fill over the top of the ranking.

    Strict pass: key item and full fingerprint both new to the batch.
    Lax pass: only the full fingerprint must be new.
    """

    name = "diversity"

    def __init__(self, pool_size: int = 50, batch_size: int = 5, kill_threshold: float = -999.0) -> None:
        self.pool_size = pool_size
        self.batch_size = batch_size
        self.kill_threshold = kill_threshold

    def select(self, ranked: Sequence[Outfit]) -> List[Outfit]:
        pool = [o for o in ranked if o.score > self.kill_threshold][: self.pool_size]
        selected: List[Outfit] = []
        seen_full: set[str] = set()
        seen_keys: set[str] = set()

        while len(selected) < self.batch_size and pool:
            idx = self._first(pool, seen_full, seen_keys, strict=True)
            if idx is None:
                idx = self._first(pool, seen_full, seen_keys, strict=False)
            if idx is None:
                break
            pick = pool.pop(idx)
            seen_full.add(pick.full_id)
            seen_keys.add(pick.key_item_id)
            selected.append(pick)
        return selected

    @staticmethod
    def _first(pool: Sequence[Outfit], seen_full: set[str], seen_keys: set[str], *, strict: bool) -> Optional[int]:
        for i, cand in enumerate(pool):
            if cand.full_id in seen_full:
                continue
            if strict and cand.key_item_id in seen_keys:
                continue
            return i
        return None
