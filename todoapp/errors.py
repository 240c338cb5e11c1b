"""Exceptions raised by the list store."""


class TodoAppError(Exception):
    """Base class for all to-do list errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoAppError):
    """A list name or todo text was rejected."""


class InvalidLengthError(ValidationError):
    """Text is empty or longer than the allowed maximum."""


class DuplicateNameError(ValidationError):
    """Another list in the session already uses this name."""


class NotFoundError(TodoAppError):
    """A list or todo index does not point at an existing item."""
