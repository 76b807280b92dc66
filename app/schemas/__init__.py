"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: Internal data structures
- Schemas: API contract (what client sends/receives)
"""

from app.schemas.schemas import (
    StudentCreate, StudentCreated, GradeCreate, GradeValue, GradeResponse,
    HealthResponse, MessageResponse, ErrorResponse
)

__all__ = [
    "StudentCreate",
    "StudentCreated",
    "GradeCreate",
    "GradeValue",
    "GradeResponse",
    "HealthResponse",
    "MessageResponse",
    "ErrorResponse",
]
