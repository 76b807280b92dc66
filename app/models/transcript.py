"""
Transcript Models

Student, CourseGrade and Transcript as held by the transcript store.
Field aliases keep the camelCase keys clients see on the wire
(studentID, studentName) while Python code uses snake_case.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


StudentID = int
Course = str


class Student(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    student_id: StudentID = Field(..., alias="studentID")
    student_name: str = Field(..., alias="studentName")


class CourseGrade(BaseModel):
    model_config = ConfigDict(frozen=True)

    course: Course
    grade: Union[int, float]


class Transcript(BaseModel):
    student: Student
    grades: List[CourseGrade] = []

    def find_grade(self, course: Course) -> Optional[CourseGrade]:
        """Return the grade entry for a course (exact, case-sensitive match)."""
        for entry in self.grades:
            if entry.course == course:
                return entry
        return None
