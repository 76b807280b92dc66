"""
Transcript Service - Main Application

FastAPI backend with:
- In-memory transcript store (students and their course grades)
- Seed data loaded on startup for debugging

Run: uvicorn app.main:app --reload
"""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import get_store, validation_error_handler
from app.api.routes import api_router
from app.core.config import Settings, get_settings
from app.core.logging_config import setup_logging
from app.schemas.schemas import HealthResponse
from app.services.transcript_store import TranscriptStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build the application around a fresh TranscriptStore."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)

        # Startup: load the seed students
        if settings.seed_on_startup:
            app.state.store.reset(settings.seed_names)
            logger.info("Initial list of transcripts:")
            logger.info(json.dumps(
                [t.model_dump(by_alias=True) for t in app.state.store.list_all()],
                indent=2
            ))
        yield

    app = FastAPI(
        title=settings.app_name,
        description="""
    In-memory academic records: students and the grades they earn in courses.

    ## Features
    - **Transcripts**: Create students, list and fetch transcripts
    - **Grades**: Record one grade per course per student, look grades up
    - **Search**: Find student IDs by exact name
    """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.store = TranscriptStore()
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # CORS middleware (allow all for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(api_router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(store: TranscriptStore = Depends(get_store)):
        """Health check with the number of stored students."""
        return HealthResponse(status="healthy", students=len(store))

    return app


app = create_app(get_settings())
