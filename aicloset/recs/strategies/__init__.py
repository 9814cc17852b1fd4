from aicloset.recs.strategies.base import Strategy
from aicloset.recs.strategies.rules import RuleBasedStrategy
from aicloset.recs.strategies.logistic import LogisticStrategy
from aicloset.recs.strategies.diversity import DiversityStrategy

__all__ = [
    "Strategy",
    "RuleBasedStrategy",
    "LogisticStrategy",
    "DiversityStrategy",
]
