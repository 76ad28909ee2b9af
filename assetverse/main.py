import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

import assetverse.models  # noqa: F401, registers all models
from assetverse.config import settings
from assetverse.database import Database
from assetverse.errors import AppError, Internal
from assetverse.routers import health, users, assets, requests, assignments, affiliations, payments, analytics
from assetverse.security import TokenVerifier
from assetverse.services.payment_service import seed_packages

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    database = Database(settings.DATABASE_URL)
    # Dev mode without alembic
    database.create_all()
    db = database.session()
    try:
        seed_packages(db)
    finally:
        db.close()

    application.state.database = database
    application.state.token_verifier = TokenVerifier(
        settings.AUTH_SECRET,
        algorithm=settings.AUTH_ALGORITHM,
        audience=settings.AUTH_AUDIENCE,
    )
    logger.info("AssetVerse started (%s)", settings.APP_ENV)

    yield

    database.dispose()
    logger.info("AssetVerse stopped")


app = FastAPI(
    title="AssetVerse",
    description="HR asset management: requests, approvals, assignments and affiliations",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.kind, "detail": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=Internal.status_code,
        content={"error": Internal.kind, "detail": Internal.default_detail},
    )


app.include_router(health.router)
app.include_router(users.router)
app.include_router(assets.router)
app.include_router(requests.router)
app.include_router(assignments.router)
app.include_router(affiliations.router)
app.include_router(payments.router)
app.include_router(analytics.router)
