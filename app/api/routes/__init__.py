"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.transcript_routes import router as transcript_router
from app.api.routes.grade_routes import router as grade_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(transcript_router)
api_router.include_router(grade_router)
