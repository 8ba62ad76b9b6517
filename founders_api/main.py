"""
FastAPI Application Entry Point

Configures the founding member spots API. The tenant store client is
created once per process by `create_app` and shared by every request;
pass a store explicitly to substitute a fake one.

Run with: uvicorn founders_api.main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.utils import get_timestamp
from .api.routes import router
from .services.founding_members import FoundingMemberService
from .storage.tenants import TenantStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ============================================================
# Application Lifespan Handler
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    - Startup: build the default store if none was injected, log
      configuration, verify the store is reachable
    - Shutdown: close the store's HTTP client
    """
    if app.state.service is None:
        app.state.service = FoundingMemberService(
            TenantStore.from_settings(),
            limit=app.state.limit
        )
    service: FoundingMemberService = app.state.service

    # ---- Startup ----
    logger.info("=" * 60)
    logger.info("FOUNDING MEMBER SPOTS API STARTING")
    logger.info("=" * 60)
    logger.info(f"API Version: {settings.api_version}")
    logger.info(f"Founding member limit: {service.limit}")

    if not settings.supabase.is_configured:
        logger.warning("⚠ Supabase URL or service-role key missing, spots will report the fallback")
    elif await service.store.health_check():
        logger.info("✓ Supabase connection verified")
    else:
        logger.warning("⚠ Could not verify Supabase connection")

    yield  # Application runs here

    # ---- Shutdown ----
    logger.info("API shutting down...")
    await service.store.aclose()


# ============================================================
# Application Factory
# ============================================================

def create_app(store=None, limit: Optional[int] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Tenant store to count against; defaults to a TenantStore
            built from the environment settings when the app starts
        limit: Founding member allotment; defaults to the configured one

    Returns:
        The configured FastAPI application

    Raises:
        ValueError: If limit is negative
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )

    app.state.limit = settings.founding.limit if limit is None else limit
    if app.state.limit < 0:
        raise ValueError(f"Founding member limit must be >= 0, got {app.state.limit}")

    # The default store owns an httpx client, so it is only built by the
    # lifespan, which also closes it
    app.state.service = None
    if store is not None:
        app.state.service = FoundingMemberService(store, limit=app.state.limit)

    # CORS middleware - the landing pages fetch the counter cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Exception, global_exception_handler)
    app.include_router(router, tags=["Founding Members"])
    app.add_api_route("/", root, methods=["GET"], tags=["Root"])

    return app


# ============================================================
# Exception Handlers
# ============================================================

async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for anything a route did not handle.

    The spots endpoint never gets here; it converts its own failures.
    """
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred. Please try again.",
            "timestamp": get_timestamp()
        }
    )


# ============================================================
# Root Endpoint
# ============================================================

async def root():
    """
    Root endpoint with API information.
    """
    return {
        "service": settings.api_title,
        "version": settings.api_version,
        "description": settings.api_description,
        "endpoints": {
            "spots_remaining": "GET /api/founding-member/spots",
            "availability": "GET /api/founding-member/availability",
            "health": "GET /health",
            "docs": "GET /docs"
        },
        "timestamp": get_timestamp()
    }


def run():
    """Serve the application with uvicorn."""
    import uvicorn

    port = settings.server_port
    logger.info(f"Starting FastAPI server on 0.0.0.0:{port}...")

    uvicorn.run(
        "founders_api.main:app",
        host="0.0.0.0",
        port=port,
        reload=False,
        workers=1,
        log_level="info"
    )


app = create_app()


if __name__ == "__main__":
    run()
