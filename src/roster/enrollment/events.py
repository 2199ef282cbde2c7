"""Event manager for roster change notifications."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import uuid4

if TYPE_CHECKING:
    from roster.students import Student


class EventType(str, Enum):
    """Types of events that can be emitted."""

    STUDENT_ADDED = "student_added"
    STUDENT_REMOVED = "student_removed"
    UNDO_ADD = "undo_add"
    UNDO_REMOVE = "undo_remove"


@dataclass
class EnrollmentEvent:
    """A change to the roster, reported after it has been applied."""

    event_type: EventType
    message: str
    student: Student
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))


EventHandler = Callable[[EnrollmentEvent], None]


@dataclass
class Subscription:
    """A handler registered with the event manager."""

    id: str
    handler: EventHandler

    @classmethod
    def create(cls, handler: EventHandler) -> Subscription:
        """Create a new subscription."""
        return cls(id=str(uuid4()), handler=handler)


@dataclass
class EventManager:
    """Synchronous observer registry for enrollment events."""

    _subscriptions: dict[str, Subscription] = field(default_factory=dict)

    def subscribe(self, handler: EventHandler) -> Subscription:
        """Register a handler for all enrollment events.

        Args:
            handler: Callable invoked with each emitted event.

        Returns:
            Subscription whose id can be passed to unsubscribe().
        """
        subscription = Subscription.create(handler)
        self._subscriptions[subscription.id] = subscription
        return subscription

    def unsubscribe(self, subscription_id: str) -> None:
        """Remove a handler.

        Args:
            subscription_id: ID of the subscription to remove.
        """
        self._subscriptions.pop(subscription_id, None)

    def emit(self, event: EnrollmentEvent) -> None:
        """Deliver an event to every handler, in subscription order.

        Args:
            event: Event to emit.
        """
        for subscription in list(self._subscriptions.values()):
            subscription.handler(event)

    @property
    def subscriber_count(self) -> int:
        """Get the number of active subscriptions."""
        return len(self._subscriptions)

    # Convenience methods for emitting specific event types

    def emit_student_added(self, student: Student) -> None:
        """Emit a student_added event."""
        self.emit(
            EnrollmentEvent(
                event_type=EventType.STUDENT_ADDED,
                message=f"Added {_label(student)}.",
                student=student,
            )
        )

    def emit_student_removed(self, student: Student) -> None:
        """Emit a student_removed event."""
        self.emit(
            EnrollmentEvent(
                event_type=EventType.STUDENT_REMOVED,
                message=f"Removed {_label(student)}.",
                student=student,
            )
        )

    def emit_undo_add(self, student: Student) -> None:
        """Emit an undo_add event."""
        self.emit(
            EnrollmentEvent(
                event_type=EventType.UNDO_ADD,
                message=f"Undo: removed {_label(student)}.",
                student=student,
            )
        )

    def emit_undo_remove(self, student: Student) -> None:
        """Emit an undo_remove event."""
        self.emit(
            EnrollmentEvent(
                event_type=EventType.UNDO_REMOVE,
                message=f"Undo: re-added {_label(student)}.",
                student=student,
            )
        )


def _label(student: Student) -> str:
    return f"{student.full_name} (FN {student.faculty_number})"
