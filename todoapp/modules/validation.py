"""Validation rules for list names and todo text.

Both functions return the error instead of raising it, so callers can decide
whether to surface it to the user or raise it. Input is expected to be
stripped of surrounding whitespace already.
"""

from typing import Iterable
from typing import Optional

from todoapp.errors import DuplicateNameError
from todoapp.errors import InvalidLengthError
from todoapp.errors import ValidationError
from todoapp.models.todo_list import TodoList

MIN_LENGTH = 1
MAX_LENGTH = 100


def _has_valid_length(text: str) -> bool:
    return MIN_LENGTH <= len(text) <= MAX_LENGTH


def validate_list_name(
    name: str, existing_lists: Iterable[TodoList]
) -> Optional[ValidationError]:
    """Check a list name against the length and uniqueness rules.

    Args:
        name: The candidate list name
        existing_lists: Lists the name must not collide with. Callers renaming
            a list pass every list except the one being renamed.

    Returns:
        The validation error, or None if the name is acceptable
    """
    if not _has_valid_length(name):
        return InvalidLengthError(
            f"List name must be between {MIN_LENGTH} and {MAX_LENGTH} characters."
        )
    if any(todo_list.name == name for todo_list in existing_lists):
        return DuplicateNameError("List name must be unique.")
    return None


def validate_todo_text(text: str) -> Optional[ValidationError]:
    """Check todo text against the length rule. Todos need not be unique."""
    if not _has_valid_length(text):
        return InvalidLengthError(
            f"Todo must be between {MIN_LENGTH} and {MAX_LENGTH} characters."
        )
    return None
