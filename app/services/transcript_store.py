"""
Transcript Store - authoritative in-memory mapping of student ID to transcript.

WHAT it guarantees:
- Student IDs are unique and never handed out twice (until reset)
- At most one grade per course per student
- A transcript exists exactly as long as its student does

Every operation takes the store lock for its whole duration, so each call stays
atomic if handlers are ever dispatched across threads. Callers get
copies of the records; nothing returned aliases internal state.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional, Union

from app.core.results import StoreError, StoreResult
from app.models.transcript import Course, CourseGrade, Student, StudentID, Transcript

logger = logging.getLogger(__name__)


class TranscriptStore:
    """Simple in-memory store of student transcripts."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._transcripts: Dict[StudentID, Transcript] = {}
        self._next_id: StudentID = 1

    def reset(self, seed_names: Iterable[str]) -> None:
        """
        Replace all state with one empty transcript per seed name.

        The ID counter restarts at 1, so IDs follow the order of seed_names.
        """
        with self._lock:
            self._transcripts.clear()
            self._next_id = 1
            for name in seed_names:
                self._create(name)
            logger.debug("Store reset with %d students", len(self._transcripts))

    def list_all(self) -> List[Transcript]:
        """All transcripts, in insertion order."""
        with self._lock:
            return [t.model_copy(deep=True) for t in self._transcripts.values()]

    def add_student(self, name: str) -> StudentID:
        """Create an empty transcript for a student and return the fresh ID."""
        with self._lock:
            student_id = self._create(name)
            logger.debug("Added student id=%d name=%r", student_id, name)
            return student_id

    def get_transcript(self, student_id: StudentID) -> Optional[Transcript]:
        """Transcript for the given ID, or None if there is no such student."""
        with self._lock:
            transcript = self._transcripts.get(student_id)
            return transcript.model_copy(deep=True) if transcript is not None else None

    def get_student_ids(self, name: str) -> List[StudentID]:
        """IDs of every student whose name matches exactly."""
        with self._lock:
            return [
                t.student.student_id
                for t in self._transcripts.values()
                if t.student.student_name == name
            ]

    def delete_student(self, student_id: StudentID) -> StoreResult[None]:
        with self._lock:
            if student_id not in self._transcripts:
                return self._no_such_student(student_id)
            del self._transcripts[student_id]
            logger.debug("Deleted student id=%d", student_id)
            return StoreResult.succeed()

    def add_grade(
        self, student_id: StudentID, course: Course, grade: Union[int, float]
    ) -> StoreResult[None]:
        """
        Record a grade for a student in a course.

        Fails with NOT_FOUND for an unknown student and DUPLICATE_GRADE when the
        course already has a grade. Grades are never overwritten.
        """
        with self._lock:
            transcript = self._transcripts.get(student_id)
            if transcript is None:
                return self._no_such_student(student_id)
            if transcript.find_grade(course) is not None:
                return StoreResult.fail(
                    StoreError.DUPLICATE_GRADE,
                    f"Student already has a grade for course {course}",
                )
            transcript.grades.append(CourseGrade(course=course, grade=grade))
            logger.debug("Added grade id=%d course=%r grade=%r", student_id, course, grade)
            return StoreResult.succeed()

    def get_grade(self, student_id: StudentID, course: Course) -> StoreResult[Union[int, float]]:
        """
        Look up a student's grade in a course.

        Fails with NOT_FOUND for an unknown student and GRADE_NOT_FOUND when the
        student has no grade for the course.
        """
        with self._lock:
            transcript = self._transcripts.get(student_id)
            if transcript is None:
                return self._no_such_student(student_id)
            entry = transcript.find_grade(course)
            if entry is None:
                return StoreResult.fail(
                    StoreError.GRADE_NOT_FOUND,
                    f"No grade found for course {course}",
                )
            return StoreResult.succeed(entry.grade)

    def __len__(self) -> int:
        with self._lock:
            return len(self._transcripts)

    # caller must hold self._lock
    def _create(self, name: str) -> StudentID:
        student = Student(student_id=self._next_id, student_name=name)
        self._next_id += 1
        self._transcripts[student.student_id] = Transcript(student=student, grades=[])
        return student.student_id

    @staticmethod
    def _no_such_student(student_id: StudentID) -> StoreResult:
        return StoreResult.fail(StoreError.NOT_FOUND, f"No such student with ID {student_id}")
