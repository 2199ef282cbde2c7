"""Forms - Caller input validation and demo data."""

from roster.forms.models import (
    DEFAULT_BIRTH_DATE,
    DEFAULT_MAJOR,
    MAJORS,
    StudentForm,
    generate_student_id,
)
from roster.forms.seed import DEMO_STUDENTS, seed_demo_students

__all__ = [
    "DEFAULT_BIRTH_DATE",
    "DEFAULT_MAJOR",
    "DEMO_STUDENTS",
    "MAJORS",
    "StudentForm",
    "generate_student_id",
    "seed_demo_students",
]
