import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from aicloset.core.config import settings
from aicloset.routers import feedback, health, items, recommendations
from aicloset.routers import taxonomy as taxonomy_router
from aicloset.llm.base import ProviderRegistry
from aicloset.llm.openai_provider import OpenAIProvider
from aicloset.llm.local_provider import HeuristicPredictor

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title=settings.APP_NAME)

# CORS
origins = settings.cors_origin_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

prefix = settings.API_PREFIX
app.include_router(health.router, prefix=prefix)
app.include_router(recommendations.router, prefix=prefix)
app.include_router(items.router, prefix=prefix)
app.include_router(taxonomy_router.router, prefix=prefix)
app.include_router(feedback.router, prefix=prefix)

# Attribute predictors; the client is created lazily so a missing API key only fails at call time
ProviderRegistry.register("local", HeuristicPredictor())
ProviderRegistry.register("openai", OpenAIProvider())

logger = logging.getLogger("aicloset.requests")

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}
