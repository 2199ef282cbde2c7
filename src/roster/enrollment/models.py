"""Data models for the enrollment undo log."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roster.students import Student


class UndoKind(StrEnum):
    """The mutation an undo entry compensates for."""

    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class UndoEntry:
    """A pending compensating action.

    Attributes:
        kind: Which mutation was recorded.
        student: The student the mutation applied to.
    """

    kind: UndoKind
    student: Student
