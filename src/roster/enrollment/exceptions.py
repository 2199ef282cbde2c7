"""Custom exceptions for the enrollment service."""


class EnrollmentError(Exception):
    """Base exception for enrollment errors."""


class DuplicateStudentError(EnrollmentError):
    """A student with the same faculty number is already on the roster."""


class MissingStudentError(EnrollmentError, TypeError):
    """No student was given to an operation that requires one."""
