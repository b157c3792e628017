import logging

from beanie import init_beanie
from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from starlette import status
from starlette.requests import Request
from starlette.responses import JSONResponse

from teamhub import models
from teamhub.api.api_v1.api import api_router
from teamhub.config import settings

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.project_name,
    openapi_url=f"{settings.api_v1_str}/openapi.json",
)

DB_MODELS = [
    models.Team,
    models.User,
]


@app.on_event("startup")
async def app_init():
    mongo_client = AsyncIOMotorClient(settings.mongodb_url())
    await init_beanie(mongo_client.get_default_database(), document_models=DB_MODELS)
    logger.info("Connected to MongoDB at %s", settings.database_url)


@app.exception_handler(PyMongoError)
async def database_error_handler(request: Request, exc: PyMongoError):
    logger.error("Database error on %s", request.url.path, exc_info=exc)
    return JSONResponse({"detail": "Internal server error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


app.include_router(api_router, prefix=settings.api_v1_str)
