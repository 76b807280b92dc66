"""
Models module - Pydantic models for the records held in memory.

Difference from schemas:
- Models: Internal data structures owned by the transcript store
- Schemas: API contract (what client sends/receives)
"""

from app.models.transcript import StudentID, Course, Student, CourseGrade, Transcript

__all__ = ["StudentID", "Course", "Student", "CourseGrade", "Transcript"]
