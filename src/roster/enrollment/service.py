"""EnrollmentService - Main API for roster operations."""

from __future__ import annotations

import logging
from collections import deque

from roster.enrollment.events import EventManager
from roster.enrollment.exceptions import DuplicateStudentError, MissingStudentError
from roster.enrollment.models import UndoEntry, UndoKind
from roster.students import Student, normalize_faculty_number

logger = logging.getLogger(__name__)


class EnrollmentService:
    """In-memory roster of students.

    Keeps students in insertion order, indexes them by normalized faculty
    number, and records one compensating entry per mutation so the most
    recent change can be undone. Every mutation (including an undo) is
    reported through the event manager; reads never emit.

    All returned sequences are fresh lists.
    """

    def __init__(
        self,
        events: EventManager | None = None,
        undo_limit: int | None = None,
    ) -> None:
        """Initialize an empty roster.

        Args:
            events: Event manager to report changes to. A private one is
                created when omitted.
            undo_limit: Maximum number of pending undo entries. Oldest
                entries are dropped past this. None means unbounded.

        Raises:
            ValueError: If undo_limit is not a positive integer.
        """
        if undo_limit is not None and undo_limit < 1:
            raise ValueError(f"undo_limit must be positive, got {undo_limit}")
        self.events = events if events is not None else EventManager()
        self._students: list[Student] = []
        self._by_faculty: dict[str, Student] = {}
        self._undo: deque[UndoEntry] = deque(maxlen=undo_limit)

    # --- Mutations ---

    def add(self, student: Student) -> None:
        """Add a student to the roster and enroll them.

        Args:
            student: The student to add.

        Raises:
            MissingStudentError: If student is None.
            DuplicateStudentError: If the faculty number is already taken.
        """
        if student is None:
            raise MissingStudentError("student is required")
        key = normalize_faculty_number(student.faculty_number)
        if key in self._by_faculty:
            logger.warning("Rejected duplicate faculty number %s", student.faculty_number)
            raise DuplicateStudentError(
                f"Student with FN={student.faculty_number} already exists."
            )

        self._insert(student)
        self._undo.append(UndoEntry(UndoKind.ADDED, student))
        logger.info("Added student %s (FN %s)", student.full_name, student.faculty_number)
        self.events.emit_student_added(student)

    def remove_by_faculty_number(self, faculty_number: str | None) -> bool:
        """Remove the student with the given faculty number.

        Args:
            faculty_number: Faculty number to look up, case-insensitive.

        Returns:
            True if a student was removed, False if the input was blank or
            no student matched.
        """
        if faculty_number is None or not faculty_number.strip():
            return False
        student = self._by_faculty.get(normalize_faculty_number(faculty_number))
        if student is None:
            logger.debug("No student with FN %s to remove", faculty_number.strip())
            return False

        self._discard(student)
        self._undo.append(UndoEntry(UndoKind.REMOVED, student))
        logger.info("Removed student %s (FN %s)", student.full_name, student.faculty_number)
        self.events.emit_student_removed(student)
        return True

    def undo(self) -> bool:
        """Revert the most recent pending mutation.

        The consumed entry is not re-recorded, so an undo cannot itself be
        undone.

        Returns:
            True if an entry was reverted, False if there was nothing to undo.
        """
        if not self._undo:
            return False
        entry = self._undo.pop()
        student = entry.student

        match entry.kind:
            case UndoKind.ADDED:
                self._discard(student)
                logger.info("Undo: removed student FN %s", student.faculty_number)
                self.events.emit_undo_add(student)
            case UndoKind.REMOVED:
                self._insert(student)
                logger.info("Undo: re-added student FN %s", student.faculty_number)
                self.events.emit_undo_remove(student)
        return True

    # --- Reads ---

    def all(self) -> list[Student]:
        """List all students in insertion order."""
        return list(self._students)

    def sorted_by_name(self) -> list[Student]:
        """List students by last name, first name, then faculty number."""
        return sorted(self._students)

    def sorted_by_faculty(self) -> list[Student]:
        """List students by faculty number, case-insensitive."""
        return sorted(self._students, key=lambda s: normalize_faculty_number(s.faculty_number))

    def search(self, term: str | None) -> list[Student]:
        """Find students whose full name or faculty number contains a term.

        Matching is case-insensitive. A blank term returns every student.

        Args:
            term: Substring to look for.

        Returns:
            Matching students in insertion order.
        """
        if term is None or not term.strip():
            return self.all()
        needle = term.strip().casefold()
        return [
            s
            for s in self._students
            if needle in s.full_name.casefold() or needle in s.faculty_number.casefold()
        ]

    def get(self, faculty_number: str) -> Student | None:
        """Look up a student by faculty number, case-insensitive."""
        return self._by_faculty.get(normalize_faculty_number(faculty_number))

    @property
    def can_undo(self) -> bool:
        """Whether undo() would revert anything."""
        return bool(self._undo)

    @property
    def undo_history(self) -> tuple[UndoEntry, ...]:
        """Pending undo entries, oldest first."""
        return tuple(self._undo)

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, faculty_number: object) -> bool:
        if not isinstance(faculty_number, str):
            return False
        return normalize_faculty_number(faculty_number) in self._by_faculty

    # --- Internals ---

    def _insert(self, student: Student) -> None:
        self._students.append(student)
        self._by_faculty[normalize_faculty_number(student.faculty_number)] = student
        student.enroll()

    def _discard(self, student: Student) -> None:
        self._students.remove(student)
        del self._by_faculty[normalize_faculty_number(student.faculty_number)]
        student.withdraw()
