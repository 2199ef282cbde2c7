"""Student entity and capability protocols."""

from __future__ import annotations

from datetime import date  # noqa: TC003 - used at runtime for attribute values
from typing import Protocol, runtime_checkable

from roster.students.exceptions import StudentValidationError

UNDECLARED_MAJOR = "Undeclared"


@runtime_checkable
class Identifiable(Protocol):
    """Anything carrying a stable unique id."""

    @property
    def id(self) -> str: ...


@runtime_checkable
class Describable(Protocol):
    """Anything that can summarize itself on a single line."""

    def describe(self) -> str: ...


@runtime_checkable
class Enrollable(Protocol):
    """Anything whose enrollment flag the roster may toggle."""

    def enroll(self) -> None: ...

    def withdraw(self) -> None: ...


def normalize_faculty_number(value: str) -> str:
    """Normalize a faculty number for lookup and comparison.

    Args:
        value: Raw faculty number.

    Returns:
        The trimmed, case-folded faculty number.
    """
    return value.strip().casefold()


def _require(value: str | None, field_name: str) -> str:
    if value is None or not value.strip():
        raise StudentValidationError(f"{field_name} is required")
    return value.strip()


def _compare(left: str, right: str) -> int:
    return (left > right) - (left < right)


class Student:
    """A student record tracked by the roster.

    Identity (`id`) and business key (`faculty_number`) are fixed for the
    lifetime of the object. Names are re-validated on every assignment and
    `major` falls back to "Undeclared" when left blank. The enrollment flag
    is only toggled through `enroll()` / `withdraw()`.

    Equality is identity: two students with the same data are still two
    different records.
    """

    def __init__(
        self,
        id: str,
        first_name: str,
        last_name: str,
        birth_date: date,
        faculty_number: str,
        major: str | None = None,
    ) -> None:
        self._id = _require(id, "id")
        self.first_name = first_name
        self.last_name = last_name
        self.birth_date = birth_date
        self._faculty_number = _require(faculty_number, "faculty_number")
        self.major = major
        self._is_enrolled = False

    @property
    def id(self) -> str:
        return self._id

    @property
    def faculty_number(self) -> str:
        return self._faculty_number

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = _require(value, "first_name")

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = _require(value, "last_name")

    @property
    def major(self) -> str:
        return self._major

    @major.setter
    def major(self, value: str | None) -> None:
        self._major = value.strip() if value and value.strip() else UNDECLARED_MAJOR

    @property
    def is_enrolled(self) -> bool:
        return self._is_enrolled

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"

    def enroll(self) -> None:
        """Mark the student as enrolled."""
        self._is_enrolled = True

    def withdraw(self) -> None:
        """Mark the student as withdrawn."""
        self._is_enrolled = False

    def describe(self) -> str:
        """Single-line summary of name, faculty number and major."""
        return f"Student: {self.full_name}, FN: {self.faculty_number}, Major: {self.major}"

    def compare_to(self, other: Student | None) -> int:
        """Compare by last name, then first name, then faculty number.

        All three keys compare case-insensitively. A missing `other` sorts
        after any student.

        Args:
            other: The student to compare against, or None.

        Returns:
            Negative, zero or positive as for a classic comparator.
        """
        if other is None:
            return 1
        by_last = _compare(self.last_name.casefold(), other.last_name.casefold())
        if by_last != 0:
            return by_last
        by_first = _compare(self.first_name.casefold(), other.first_name.casefold())
        if by_first != 0:
            return by_first
        return _compare(
            normalize_faculty_number(self.faculty_number),
            normalize_faculty_number(other.faculty_number),
        )

    def __lt__(self, other: Student) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self) -> str:
        status = "Enrolled" if self.is_enrolled else "Withdrawn"
        return (
            f"{self.full_name} (FN: {self.faculty_number}, Major: {self.major}) | "
            f"Born: {self.birth_date:%d.%m.%Y} | {status}"
        )

    def __repr__(self) -> str:
        return (
            f"<Student(id={self.id!r}, faculty_number={self.faculty_number!r}, "
            f"name={self.full_name!r})>"
        )
