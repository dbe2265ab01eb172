"""
FastAPI application entry point for the parts catalog backend.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from catalog.config import MissingSupabaseConfigError, settings
from catalog.routes.cart import router as cart_router
from catalog.routes.health import router as health_router
from catalog.routes.parts import router as parts_router
from catalog.routes.users import router as users_router
from catalog.routes.verification import router as verification_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (none allowed if unset)
    - anything else: Allows all origins for local development

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No web origins allowed. Set CORS_ALLOWED_ORIGINS for web clients."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Parts Catalog API",
    description="Backend service for the parts catalog (Supabase)",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


def jsonable_errors(exc: RequestValidationError) -> list:
    # ctx may hold exception instances that are not JSON serializable
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(error)
    return errors


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log detailed validation errors for debugging."""
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": jsonable_errors(exc),
        }
    )


@app.exception_handler(MissingSupabaseConfigError)
async def missing_config_exception_handler(request: Request, exc: MissingSupabaseConfigError):
    """The database is unreachable without configuration; report 503, not 500."""
    logger.error(f"{request.method} {request.url.path} failed: {exc}")

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "error": "service_unavailable",
            "details": str(exc),
        }
    )


# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(parts_router)
app.include_router(users_router)
app.include_router(cart_router)
app.include_router(verification_router)

logger.info("FastAPI app initialized successfully")
