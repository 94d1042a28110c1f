"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from up_real_estate import __version__
from up_real_estate.api import router as api_router
from up_real_estate.api.responses import error_response
from up_real_estate.config import get_settings
from up_real_estate.exceptions import UpRealEstateError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Investment return projections for real estate listings",
    version=__version__,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(UpRealEstateError)
async def domain_error_handler(request: Request, exc: UpRealEstateError):
    """Translate domain errors into the failure envelope."""
    logger.info(f"{request.method} {request.url.path} failed: {exc}")
    return error_response(exc.status_code, str(exc))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report invalid query parameters in the failure envelope."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or 'request'}: {err['msg']}"
        for err in exc.errors()
    )
    return error_response(422, f"Invalid request: {problems}")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__}
