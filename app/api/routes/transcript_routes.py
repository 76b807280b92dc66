"""
Transcript Routes

GET /transcripts - List all transcripts (handy for debugging)
POST /transcripts - Create a student with an empty transcript
GET /transcripts/{student_id} - Get one student's transcript
GET /studentids?name= - Get IDs of students with a given name
DELETE /students/{student_id} - Delete a student and their transcript
"""

import logging

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List

from app.api.deps import get_store, raise_for_result
from app.models.transcript import Transcript
from app.services.transcript_store import TranscriptStore
from app.schemas.schemas import StudentCreate, StudentCreated, MessageResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Transcripts"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("/transcripts", response_model=List[Transcript])
async def list_transcripts(store: TranscriptStore = Depends(get_store)):
    """Return every transcript in the system."""
    logger.info("Handling GET /transcripts")
    return store.list_all()


@router.post("/transcripts", response_model=StudentCreated, status_code=201)
async def create_student(data: StudentCreate, store: TranscriptStore = Depends(get_store)):
    """Create a new student with an empty transcript and return the fresh ID."""
    student_id = store.add_student(data.name)
    logger.info("Handling POST /transcripts name=%s, id=%d", data.name, student_id)
    return StudentCreated(student_id=student_id)


@router.get("/transcripts/{student_id}", response_model=Transcript, responses=NOT_FOUND)
async def get_transcript(student_id: int, store: TranscriptStore = Depends(get_store)):
    """Get the transcript for the student with the given ID."""
    logger.info("Handling GET /transcripts/{id} id=%d", student_id)
    transcript = store.get_transcript(student_id)
    if transcript is None:
        raise HTTPException(status_code=404, detail=f"No student with id={student_id}")
    return transcript


@router.get("/studentids", response_model=List[int])
async def get_student_ids(
    name: str = Query(..., min_length=1, description="Exact (case-sensitive) student name"),
    store: TranscriptStore = Depends(get_store)
):
    """Get the IDs of all students with the given name."""
    logger.info("Handling GET /studentids?name=%s", name)
    return store.get_student_ids(name)


@router.delete("/students/{student_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_student(student_id: int, store: TranscriptStore = Depends(get_store)):
    """Delete the student and their transcript."""
    logger.info("Handling DELETE /students/{id} id=%d", student_id)
    raise_for_result(store.delete_student(student_id))
    return MessageResponse(message=f"Student {student_id} deleted")
