"""Enrollment - In-memory roster service with undo and change events."""

from roster.enrollment.events import (
    EnrollmentEvent,
    EventManager,
    EventType,
    Subscription,
)
from roster.enrollment.exceptions import (
    DuplicateStudentError,
    EnrollmentError,
    MissingStudentError,
)
from roster.enrollment.models import UndoEntry, UndoKind
from roster.enrollment.service import EnrollmentService

__all__ = [
    "DuplicateStudentError",
    "EnrollmentError",
    "EnrollmentEvent",
    "EnrollmentService",
    "EventManager",
    "EventType",
    "MissingStudentError",
    "Subscription",
    "UndoEntry",
    "UndoKind",
]
