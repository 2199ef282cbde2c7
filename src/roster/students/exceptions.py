"""Custom exceptions for Student entities."""


class StudentValidationError(ValueError):
    """A required Student field is missing or blank."""
