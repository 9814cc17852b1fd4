from typing import Protocol

from aicloset.recs.types import Outfit, Preferences


class Strategy(Protocol):
    name: str

    def score(self, outfit: Outfit, preferences: Preferences) -> float:
        ...
