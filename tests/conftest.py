"""Shared pytest fixtures and configuration."""

import logging
from collections.abc import Iterator
from datetime import date

import pytest

from roster.enrollment import EnrollmentEvent, EnrollmentService, EventManager
from roster.students import Student


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


@pytest.fixture(autouse=True)
def reset_roster_logger() -> Iterator[None]:
    """Detach handlers installed by setup_logging so tests don't leak files."""
    yield
    logger = logging.getLogger("roster")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def build_student(
    faculty_number: str = "F100001",
    first_name: str = "Ivan",
    last_name: str = "Petrov",
    major: str | None = "Computer Science",
) -> Student:
    """Build a student with sensible defaults."""
    return Student(
        id=f"id-{faculty_number}",
        first_name=first_name,
        last_name=last_name,
        birth_date=date(2002, 5, 12),
        faculty_number=faculty_number,
        major=major,
    )


@pytest.fixture
def make_student():
    """Factory for students with sensible defaults."""
    return build_student


@pytest.fixture
def events() -> EventManager:
    """Create an EventManager instance."""
    return EventManager()


@pytest.fixture
def received(events: EventManager) -> list[EnrollmentEvent]:
    """Collect every event emitted on the shared event manager."""
    collected: list[EnrollmentEvent] = []
    events.subscribe(collected.append)
    return collected


@pytest.fixture
def service(events: EventManager) -> EnrollmentService:
    """Create an empty roster wired to the shared event manager."""
    return EnrollmentService(events=events)
