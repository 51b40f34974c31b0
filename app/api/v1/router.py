from fastapi import APIRouter
from app.api.v1.endpoints import (
    notifications,
    consent,
    generation,
    materials,
    test_results,
)

# ============================================================
# Main API v1 Router
# ============================================================

api_router = APIRouter()

api_router.include_router(
    notifications.router,
    prefix=""  # Routes define own prefix (/notifications)
)

api_router.include_router(
    consent.router,
    prefix=""  # Routes define own prefix (/consent)
)

# AI generation routes at /ai/...
api_router.include_router(
    generation.router,
    prefix=""
)

# Library routes at /materials/... and /test-results/...
api_router.include_router(
    materials.router,
    prefix=""
)

api_router.include_router(
    test_results.router,
    prefix=""
)
