"""Pydantic models for caller-side student input."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roster.students import Student

MAJORS = (
    "Computer Science",
    "Software Engineering",
    "Information Systems",
    "Business Informatics",
    "Cybersecurity",
    "Undeclared",
)

DEFAULT_MAJOR = MAJORS[0]
DEFAULT_BIRTH_DATE = date(2000, 1, 1)


def generate_student_id() -> str:
    """Generate a new opaque student id."""
    return str(uuid4())


class StudentForm(BaseModel):
    """Input collected from a caller before a Student is built."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    faculty_number: str = Field(..., min_length=1)
    birth_date: date = DEFAULT_BIRTH_DATE
    major: str = DEFAULT_MAJOR

    @field_validator("birth_date")
    @classmethod
    def birth_date_not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError("birth date cannot be in the future")
        return value

    @field_validator("major")
    @classmethod
    def major_is_known(cls, value: str) -> str:
        for major in MAJORS:
            if major.casefold() == value.casefold():
                return major
        raise ValueError(f"unknown major {value!r}; choose one of: {', '.join(MAJORS)}")

    def to_student(self, id_factory: Callable[[], str] = generate_student_id) -> Student:
        """Build a Student from the form.

        Args:
            id_factory: Produces the new student's id.

        Returns:
            A new, not yet enrolled Student.
        """
        return Student(
            id=id_factory(),
            first_name=self.first_name,
            last_name=self.last_name,
            birth_date=self.birth_date,
            faculty_number=self.faculty_number,
            major=self.major,
        )
