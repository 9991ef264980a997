"""
API routes initialization.

This module aggregates all API routers and provides a single router
to include in the main application.
"""

from fastapi import APIRouter

from streamvault.api.routes import advertisements, content

# Create main API router
api_router = APIRouter()

# Advertisement request routes
api_router.include_router(advertisements.router)

# Hero, embed and player routes
api_router.include_router(content.router)
