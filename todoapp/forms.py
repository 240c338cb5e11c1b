"""Forms for the list and todo routes.

Forms only normalise input and carry the CSRF token. Length and uniqueness
rules live in ``todoapp.modules.validation`` and are enforced by the store.
"""

from flask_wtf import FlaskForm
from wtforms import StringField


def strip_whitespace(value) -> str:
    """Trim surrounding whitespace, treating a missing value as empty."""
    if not isinstance(value, str):
        return ""
    return value.strip()


class ListForm(FlaskForm):
    """Create or rename a list."""

    list_name = StringField("List name", filters=[strip_whitespace])


class TodoForm(FlaskForm):
    """Add a todo to a list."""

    todo = StringField("Todo", filters=[strip_whitespace])


class TodoStatusForm(FlaskForm):
    """Mark a todo as completed or not completed."""

    completed = StringField("Completed", filters=[strip_whitespace])

    @property
    def is_completed(self) -> bool:
        return self.completed.data == "true"


class ActionForm(FlaskForm):
    """Button-only forms such as delete and complete all."""
