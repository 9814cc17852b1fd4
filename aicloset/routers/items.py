from fastapi import APIRouter, HTTPException

from aicloset.llm.types import PredictRequest
from aicloset.schemas.suggest import PredictAttributesOut, PredictMeta
from aicloset.services.suggest import predict_item_attributes

router = APIRouter(prefix="/items", tags=["items"])


@router.post("/predict-attributes", response_model=PredictAttributesOut)
async def predict_attributes(payload: PredictRequest):
    if not (payload.image_url or payload.image_b64 or payload.filename or payload.name_hint):
        raise HTTPException(status_code=400, detail="image_url, image_b64, filename or name_hint is required")
    try:
        attrs, meta = await predict_item_attributes(payload)
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return PredictAttributesOut(attributes=attrs, meta=PredictMeta(**meta))
