from fastapi import APIRouter, Depends, HTTPException

from aicloset.schemas.recs import OutfitOut, RecommendIn, RecommendOut
from aicloset.routers.feedback import get_feedback_service
from aicloset.services.feedback import FeedbackService
from aicloset.services.recs import RecommendationService

router = APIRouter(prefix="/recommendations", tags=["recommendations"])

_service: RecommendationService | None = None


def get_recs_service() -> RecommendationService:
    global _service
    if _service is None:
        _service = RecommendationService()
    return _service


@router.post("/outfits", response_model=RecommendOut)
async def recommend_outfits(
    payload: RecommendIn,
    service: RecommendationService = Depends(get_recs_service),
    feedback: FeedbackService = Depends(get_feedback_service),
):
    prefs = payload.preferences.to_preferences(feedback.penalized_outerwear_ids(payload.user_id))
    items = [i.to_item() for i in payload.items]
    result = service.recommend_outfits(payload.user_id, items, prefs)
    if not result.success:
        raise HTTPException(status_code=422, detail={"reason": result.reason.value, "message": result.message})
    outfits = [OutfitOut.from_outfit(o) for o in result.outfits]
    return RecommendOut(outfits=outfits, primary=outfits[0] if outfits else None)
