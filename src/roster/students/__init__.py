"""Students - Student entity and the capabilities the roster relies on."""

from roster.students.exceptions import StudentValidationError
from roster.students.models import (
    UNDECLARED_MAJOR,
    Describable,
    Enrollable,
    Identifiable,
    Student,
    normalize_faculty_number,
)

__all__ = [
    "UNDECLARED_MAJOR",
    "Describable",
    "Enrollable",
    "Identifiable",
    "Student",
    "StudentValidationError",
    "normalize_faculty_number",
]
