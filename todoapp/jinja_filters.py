from todoapp.models.todo_list import TodoList
from todoapp.modules.presentation import is_list_complete
from todoapp.modules.presentation import list_class
from todoapp.modules.presentation import remaining_count
from todoapp.modules.presentation import sorted_lists_for_display
from todoapp.modules.presentation import sorted_todos_for_display
from todoapp.modules.presentation import todo_class
from todoapp.modules.presentation import total_count


def todo_progress(value) -> str:
    """Format the remaining and total todo counts of a list.

    Renders as "remaining / total", e.g. "2 / 5" for a list with five todos of
    which three are completed.

    Args:
        value: The TodoList to summarise

    Returns:
        Formatted progress string
    """
    if not isinstance(value, TodoList):
        return str(value)

    return f"{remaining_count(value)} / {total_count(value)}"


def register_filters(app):
    """Register all Jinja template filters and helpers with the Quart application.

    Args:
        app: Quart application instance
    """
    app.jinja_env.filters["todo_progress"] = todo_progress
    app.jinja_env.filters["list_class"] = list_class
    app.jinja_env.filters["todo_class"] = todo_class

    app.jinja_env.globals["is_list_complete"] = is_list_complete
    app.jinja_env.globals["remaining_count"] = remaining_count
    app.jinja_env.globals["total_count"] = total_count
    app.jinja_env.globals["sorted_lists"] = sorted_lists_for_display
    app.jinja_env.globals["sorted_todos"] = sorted_todos_for_display
