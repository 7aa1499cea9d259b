import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from sqlalchemy.exc import SQLAlchemyError

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from src.fleet_readiness.config import get_settings
from src.fleet_readiness.database.database import DatabaseManager
from src.fleet_readiness.expansion_readiness.routes import expansion_readiness_router
from src.fleet_readiness.health_check.routes import health_router
from src.fleet_readiness.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
settings = get_settings()
PROJECT_NAME = settings.PROJECT_NAME
FastAPI_API_KEY_HEADER = settings.FASTAPI_API_KEY_HEADER
COMPANY_ID_HEADER = settings.COMPANY_ID_HEADER
ALL_CORS_ORIGINS = settings.all_cors_origins


# Custom OpenAPI schema to include API key and tenant headers
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=PROJECT_NAME,
        version="0.1.0",
        description="Fleet utilization and expansion readiness analytics",
        routes=app.routes,
    )

    if "components" not in openapi_schema:
        openapi_schema["components"] = {}

    openapi_schema["components"]["securitySchemes"] = {
        "APIKeyHeader": {
            "type": "apiKey",
            "in": "header",
            "name": FastAPI_API_KEY_HEADER,
        },
        "CompanyHeader": {
            "type": "apiKey",
            "in": "header",
            "name": COMPANY_ID_HEADER,
        },
    }

    for path in openapi_schema["paths"].values():
        for method in path.values():
            method.setdefault("security", []).append(
                {"APIKeyHeader": [], "CompanyHeader": []}
            )

    app.openapi_schema = openapi_schema
    return app.openapi_schema


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore
    try:
        await DatabaseManager.connect()
        logger.info("Startup complete")
        yield
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Startup failed: {str(e)}")
        raise
    finally:
        await DatabaseManager.disconnect()
        logger.info("Shutdown complete")


app = FastAPI(title=PROJECT_NAME, version="0.1.0", lifespan=lifespan)
app.openapi = custom_openapi  # type: ignore[method-assign]


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s: %s", request.url.path, str(exc))
    return JSONResponse(
        status_code=HTTPStatus.SERVICE_UNAVAILABLE,
        content={"detail": "Database connection error. Please try again later."},
    )


# Set all CORS enabled origins
if ALL_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALL_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# API Routes
api_router = APIRouter(prefix="/api")
api_router.include_router(expansion_readiness_router)
app.include_router(api_router)
app.include_router(health_router)
