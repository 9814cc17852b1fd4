from aicloset.services.recs.service import RecommendationService, build_history_store

__all__ = ["RecommendationService", "build_history_store"]
