"""Brands API routes - main router that includes all route modules."""

from fastapi import APIRouter

from public_brands_api.features.brands.routes.brands import router as brands_router
from public_brands_api.features.brands.routes.health import router as health_router

router = APIRouter(tags=["brands"])

# Include all route handlers
router.include_router(brands_router)
router.include_router(health_router)
