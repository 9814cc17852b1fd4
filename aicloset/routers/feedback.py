from fastapi import APIRouter, Depends, Query

from aicloset.schemas.feedback import FeedbackIn, FeedbackMetricsOut, FeedbackOut
from aicloset.services.feedback import FeedbackService, feedback_service

router = APIRouter(prefix="/feedback", tags=["feedback"])


def get_feedback_service() -> FeedbackService:
    return feedback_service


@router.post("", response_model=FeedbackOut, status_code=201)
async def submit_feedback(payload: FeedbackIn, service: FeedbackService = Depends(get_feedback_service)):
    rec = service.record(payload.user_id, payload.to_record())
    return FeedbackOut(
        outfit_type=rec.outfit_type, liked=rec.liked, outerwear_id=rec.outerwear_id, created_at=rec.created_at
    )


@router.get("/metrics", response_model=FeedbackMetricsOut)
async def feedback_metrics(
    user_id: str = Query("me"), service: FeedbackService = Depends(get_feedback_service)
):
    return FeedbackMetricsOut(**service.metrics(user_id))
