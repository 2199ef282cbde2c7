"""Unit tests for EventManager and events."""

import pytest

from roster.enrollment import EnrollmentEvent, EventManager, EventType


@pytest.mark.unit
class TestEventManagerSubscribe:
    """Tests for EventManager.subscribe."""

    def test_event_manager_subscribe(self, events: EventManager) -> None:
        """Handler can subscribe."""
        subscription = events.subscribe(lambda event: None)

        assert subscription.id is not None
        assert events.subscriber_count == 1

    def test_subscriptions_get_distinct_ids(self, events: EventManager) -> None:
        first = events.subscribe(lambda event: None)
        second = events.subscribe(lambda event: None)

        assert first.id != second.id
        assert events.subscriber_count == 2


@pytest.mark.unit
class TestEventManagerUnsubscribe:
    """Tests for EventManager.unsubscribe."""

    def test_event_manager_unsubscribe(self, events: EventManager) -> None:
        """Handler can unsubscribe and stops receiving events."""
        received: list[EnrollmentEvent] = []
        subscription = events.subscribe(received.append)

        events.unsubscribe(subscription.id)

        assert events.subscriber_count == 0

    def test_event_manager_unsubscribe_nonexistent(self, events: EventManager) -> None:
        """Unsubscribing an unknown id doesn't fail."""
        events.unsubscribe("nonexistent-id")

        assert events.subscriber_count == 0


@pytest.mark.unit
class TestEventManagerEmit:
    """Tests for EventManager.emit and the convenience emitters."""

    def test_emit_reaches_all_handlers_in_order(self, events: EventManager, make_student) -> None:
        calls: list[str] = []
        events.subscribe(lambda event: calls.append("first"))
        events.subscribe(lambda event: calls.append("second"))

        events.emit_student_added(make_student())

        assert calls == ["first", "second"]

    def test_unsubscribed_handler_not_called(self, events: EventManager, make_student) -> None:
        received: list[EnrollmentEvent] = []
        subscription = events.subscribe(received.append)
        events.unsubscribe(subscription.id)

        events.emit_student_removed(make_student())

        assert received == []

    def test_emit_no_subscribers(self, events: EventManager, make_student) -> None:
        """Emit doesn't fail with no subscribers."""
        events.emit_undo_add(make_student())

    def test_handler_may_unsubscribe_itself(self, events: EventManager, make_student) -> None:
        calls: list[EnrollmentEvent] = []

        def once(event: EnrollmentEvent) -> None:
            calls.append(event)
            events.unsubscribe(subscription.id)

        subscription = events.subscribe(once)
        events.emit_student_added(make_student())
        events.emit_student_added(make_student())

        assert len(calls) == 1

    def test_handler_errors_propagate(self, events: EventManager, make_student) -> None:
        def broken(event: EnrollmentEvent) -> None:
            raise RuntimeError("render failed")

        events.subscribe(broken)

        with pytest.raises(RuntimeError, match="render failed"):
            events.emit_student_added(make_student())

    @pytest.mark.parametrize(
        ("emitter", "event_type", "message"),
        [
            ("emit_student_added", EventType.STUDENT_ADDED, "Added Ivan Petrov (FN F100001)."),
            ("emit_student_removed", EventType.STUDENT_REMOVED, "Removed Ivan Petrov (FN F100001)."),
            ("emit_undo_add", EventType.UNDO_ADD, "Undo: removed Ivan Petrov (FN F100001)."),
            ("emit_undo_remove", EventType.UNDO_REMOVE, "Undo: re-added Ivan Petrov (FN F100001)."),
        ],
    )
    def test_convenience_emitters(
        self,
        events: EventManager,
        received: list[EnrollmentEvent],
        make_student,
        emitter: str,
        event_type: EventType,
        message: str,
    ) -> None:
        student = make_student()

        getattr(events, emitter)(student)

        assert len(received) == 1
        assert received[0].event_type == event_type
        assert received[0].message == message
        assert received[0].student is student


@pytest.mark.unit
class TestEventType:
    """Tests for EventType values."""

    def test_values_are_strings(self) -> None:
        assert EventType.STUDENT_ADDED == "student_added"
        assert EventType.UNDO_REMOVE.value == "undo_remove"
