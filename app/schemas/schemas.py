"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Transcripts themselves are returned using app.models.transcript.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from typing import Annotated, Union


# Finite JSON number; booleans and inf/nan are rejected
GradeNumber = Union[StrictInt, Annotated[StrictFloat, Field(allow_inf_nan=False)]]


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1)

class StudentCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: int = Field(..., alias="studentID")


# ============================================================
# GRADE SCHEMAS
# ============================================================

class GradeCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: StrictInt = Field(..., alias="studentID")
    course: str = Field(..., min_length=1)
    grade: GradeNumber

class GradeValue(BaseModel):
    grade: GradeNumber

class GradeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: int = Field(..., alias="studentID")
    course: str
    grade: Union[int, float]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class HealthResponse(BaseModel):
    status: str
    students: int

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class ErrorResponse(BaseModel):
    detail: str
