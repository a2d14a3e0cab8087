"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calorie_api.api.routes import calorie_intake
from calorie_api.core.config import get_settings
from calorie_api.core.exceptions import APIError
from calorie_api.db.mongo import MongoDB
from calorie_api.services.nutrition_lookup import (
    NutritionLookupError,
    clear_service_cache,
    get_nutrition_lookup_service,
)

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, data: Any = None) -> JSONResponse:
    content: dict[str, Any] = {"ok": False, "message": message}
    if data is not None:
        content["data"] = jsonable_encoder(data)
    return JSONResponse(status_code=status_code, content=content)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Connects MongoDB on startup; closes it and the nutrition client on shutdown.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.api_version}")
    logger.info(f"Connecting to MongoDB at {settings.mongo_uri[:20]}...")

    MongoDB.connect(settings.mongo_uri, settings.db_name)

    yield

    logger.info("Shutting down...")
    nutrition_service = get_nutrition_lookup_service()
    if nutrition_service is not None:
        await nutrition_service.close()
    clear_service_cache()
    MongoDB.close()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.api_version,
        description="Calorie intake tracking with nutrition lookup and BMR goals",
        lifespan=lifespan,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers: every failure uses the {ok, message, data} envelope
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        """Handle custom API errors."""
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return _envelope(exc.status_code, exc.message, exc.details)

    @app.exception_handler(NutritionLookupError)
    async def nutrition_error_handler(request: Request, exc: NutritionLookupError):
        """Handle failures of the external nutrition source."""
        logger.error(
            f"Nutrition lookup failed ({exc.provider}, {exc.error_code}): {exc.message}"
        )
        return _envelope(exc.status_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies are client errors (400)."""
        return _envelope(400, "Invalid request", exc.errors())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Wrap framework HTTP errors (404 route, 405 method) in the envelope."""
        return _envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Anything else is a 500, still in the envelope."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _envelope(500, "Internal server error")

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.api_version,
            "mongodb": MongoDB.is_connected(),
            "nutrition_lookup": settings.is_nutrition_configured,
        }

    # Root endpoint
    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.app_name,
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    # Include routers
    app.include_router(
        calorie_intake.router,
        prefix=settings.route_prefix,
        tags=["Calorie Intake"],
    )

    return app


# Create app instance
app = create_app()
