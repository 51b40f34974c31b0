"""
FastAPI Application Entry Point

This module initializes the FastAPI application with:
- AI client initialization (credential check)
- CORS configuration
- Route registration
- Health check endpoints
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.ai.llm import initialize_ai, check_gemini_health, Ready
from app.db.redis import close_redis_pool
from app.storage import get_kv_store, KeyValueStoreError
from app.api.v1.router import api_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# ============================================================
# Application Lifespan Events
# ============================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Startup:
    - Check AI credentials (a missing key is logged loudly; generation
      requests fail until it is fixed)
    - Check key-value store connectivity

    Shutdown:
    - Close Redis connections
    """
    # ========== STARTUP ==========
    logger.info(f"Starting {settings.PROJECT_NAME}...")
    logger.info(f"Debug mode: {settings.DEBUG}")

    status = initialize_ai()
    if not isinstance(status, Ready):
        logger.error("AI features are disabled: %s", status.message)

    try:
        if await get_kv_store().ping():
            logger.info(f"Key-value store ready ({settings.KV_BACKEND})")
        else:
            logger.warning("Key-value store check failed - notifications and consent may not persist")
    except KeyValueStoreError as e:
        logger.error(f"Key-value store error on startup: {e}")

    yield  # Application runs here

    # ========== SHUTDOWN ==========
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")

    if settings.KV_BACKEND == "redis":
        await close_redis_pool()

    logger.info("Shutdown complete")


# ============================================================
# Create FastAPI Application
# ============================================================
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
    AI-Powered Study Materials API

    Features:
    - Practice Test Generation
    - Flashcard Generation
    - Summary Notes
    - Handwritten Notes OCR
    - Saved Materials and Test History
    - In-app Notifications
    - Cookie Consent
    """,
    version="1.0.0",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# ----------------------------------------------------
# Middleware Configuration
# ----------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.DEBUG else settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    expose_headers=["*"],
)


# ----------------------------------------------------
# Health Check Endpoints
# ----------------------------------------------------
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs" if settings.DEBUG else "disabled"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint for monitoring.

    Checks:
    - AI client configuration
    - Key-value store connectivity
    """
    ai_ready = check_gemini_health()
    try:
        store_healthy = await get_kv_store().ping()
    except KeyValueStoreError as e:
        logger.error(f"Health check failed: {e}")
        store_healthy = False

    status = "healthy" if ai_ready and store_healthy else "degraded"
    return {
        "status": status,
        "ai": "configured" if ai_ready else "missing_credentials",
        "kv_store": "connected" if store_healthy else "disconnected",
    }

# ============================================================
# Include API Router
# ============================================================
app.include_router(
    api_router,
    prefix=settings.API_V1_PREFIX
)


# ----------------------------------------------------
# Exception Handlers
# ----------------------------------------------------
@app.exception_handler(KeyValueStoreError)
async def kv_store_error_handler(request, exc):
    """Storage outages surface as 503."""
    logger.error(f"Key-value store error: {exc}")
    return JSONResponse(
        status_code=503,
        content={"detail": "Storage temporarily unavailable"}
    )


@app.exception_handler(500)
async def internal_error_handler(request, exc):
    """Handle 500 errors."""
    logger.error(f"Internal server error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )
