"""
Grade Routes

POST /grades - Add a grade (studentID, course, grade in the body)
GET /grades?studentID=&course= - Get a grade
POST /transcripts/{student_id}/{course} - Add a grade for a student in a course
GET /transcripts/{student_id}/{course} - Get a grade for a student in a course

Grades are write-once: adding a second grade for the same course is a 400.
"""

import logging

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_store, raise_for_result
from app.services.transcript_store import TranscriptStore
from app.schemas.schemas import GradeCreate, GradeValue, GradeResponse, MessageResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Grades"])

ADD_ERRORS = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
GET_ERRORS = {404: {"model": ErrorResponse}}


def _lookup_grade(store: TranscriptStore, student_id: int, course: str) -> GradeResponse:
    result = store.get_grade(student_id, course)
    raise_for_result(result)
    return GradeResponse(student_id=student_id, course=course, grade=result.value)


@router.post("/grades", response_model=MessageResponse, status_code=201, responses=ADD_ERRORS)
async def add_grade(data: GradeCreate, store: TranscriptStore = Depends(get_store)):
    """
    Add a grade for a student in a course.

    A grade of 0 is a real grade; only missing fields are rejected.
    """
    logger.info("Handling POST /grades id=%d course=%s", data.student_id, data.course)
    raise_for_result(store.add_grade(data.student_id, data.course, data.grade))
    return MessageResponse(message=f"Grade added for student {data.student_id} in {data.course}")


@router.get("/grades", response_model=GradeResponse, responses=GET_ERRORS)
async def get_grade(
    student_id: int = Query(..., alias="studentID"),
    course: str = Query(..., min_length=1),
    store: TranscriptStore = Depends(get_store)
):
    """Get the grade for a specific student in a specific course."""
    logger.info("Handling GET /grades?studentID=%d&course=%s", student_id, course)
    return _lookup_grade(store, student_id, course)


@router.post("/transcripts/{student_id}/{course}", response_model=MessageResponse, status_code=201, responses=ADD_ERRORS)
async def add_course_grade(
    student_id: int,
    course: str,
    data: GradeValue,
    store: TranscriptStore = Depends(get_store)
):
    """Add a grade for the student in the course named by the path."""
    logger.info("Handling POST /transcripts/{id}/{course} id=%d course=%s", student_id, course)
    raise_for_result(store.add_grade(student_id, course, data.grade))
    return MessageResponse(message=f"Grade {data.grade} added for student {student_id} in {course}")


@router.get("/transcripts/{student_id}/{course}", response_model=GradeResponse, responses=GET_ERRORS)
async def get_course_grade(student_id: int, course: str, store: TranscriptStore = Depends(get_store)):
    """Get the grade for the student in the course named by the path."""
    logger.info("Handling GET /transcripts/{id}/{course} id=%d course=%s", student_id, course)
    return _lookup_grade(store, student_id, course)
