"""Demo students added when a roster session starts."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from roster.forms.models import StudentForm

if TYPE_CHECKING:
    from roster.enrollment import EnrollmentService

logger = logging.getLogger(__name__)

DEMO_STUDENTS = (
    StudentForm(
        first_name="Ivan",
        last_name="Petrov",
        birth_date=date(2002, 5, 12),
        faculty_number="F100001",
        major="Computer Science",
    ),
    StudentForm(
        first_name="Maria",
        last_name="Georgieva",
        birth_date=date(2001, 11, 3),
        faculty_number="F100002",
        major="Software Engineering",
    ),
    StudentForm(
        first_name="Georgi",
        last_name="Ivanov",
        birth_date=date(2003, 2, 28),
        faculty_number="F100003",
        major="Cybersecurity",
    ),
)


def seed_demo_students(service: EnrollmentService) -> int:
    """Add the demo students that are not already on the roster.

    Args:
        service: Roster to seed.

    Returns:
        Number of students added.
    """
    added = 0
    for form in DEMO_STUDENTS:
        if form.faculty_number in service:
            continue
        service.add(form.to_student())
        added += 1
    logger.info("Seeded %d demo students", added)
    return added
