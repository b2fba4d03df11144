"""
FastAPI application for the source category API
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import logging

from category_api import __version__
from category_api.core.config import settings
from category_api.core.errors import CategoryResolutionError
from category_api.api.api_v1.api import api_router
from category_api.services.category_service import get_category_service

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Source Category API",
    description="Per-user category lists from configured content sources",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    started = time.time()
    response = await call_next(request)
    response.headers["X-Process-Time"] = str(time.time() - started)
    return response

app.include_router(api_router, prefix="/api/v1")

@app.get("/health")
async def health_check():
    """Liveness probe"""
    return {"status": "healthy", "timestamp": time.time(), "version": __version__}

@app.get("/")
async def root():
    """Service name, version and where to look next"""
    return {
        "message": "Source Category API",
        "version": __version__,
        "categories": "/api/v1/source-search/categories?source=<key>",
        "health": "/health",
    }

@app.exception_handler(CategoryResolutionError)
async def category_error_handler(request: Request, exc: CategoryResolutionError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})

@app.on_event("startup")
async def load_site_config_on_startup():
    """Build the category service so a broken site config fails at boot"""
    get_category_service()
    logger.info(f"Source Category API {__version__} ready")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "category_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
