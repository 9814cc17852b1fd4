from fastapi import APIRouter
from aicloset.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"status": "ok", "env": settings.APP_ENV}
