"""Display helpers for lists and todos."""

from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

from todoapp.models.todo_list import Todo
from todoapp.models.todo_list import TodoList


def remaining_count(todo_list: TodoList) -> int:
    """Count the todos that are not completed yet."""
    return sum(1 for todo in todo_list.todos if not todo.completed)


def total_count(todo_list: TodoList) -> int:
    return len(todo_list.todos)


def is_list_complete(todo_list: TodoList) -> bool:
    """A list is complete when it has todos and none of them remain.

    An empty list is never complete.
    """
    return total_count(todo_list) > 0 and remaining_count(todo_list) == 0


def list_class(todo_list: TodoList) -> Optional[str]:
    """CSS class for a list row."""
    return "complete" if is_list_complete(todo_list) else None


def todo_class(todo: Todo) -> Optional[str]:
    """CSS class for a todo row."""
    return "complete" if todo.completed else None


def sorted_lists_for_display(
    lists: Sequence[TodoList],
) -> List[Tuple[TodoList, int]]:
    """Order lists with incomplete ones first, keeping relative order.

    Each list is paired with its stored index so that links built from the
    sorted sequence still point at the right list.
    """
    indexed = list(enumerate(lists))
    incomplete = [(lst, i) for i, lst in indexed if not is_list_complete(lst)]
    complete = [(lst, i) for i, lst in indexed if is_list_complete(lst)]
    return incomplete + complete


def sorted_todos_for_display(todos: Sequence[Todo]) -> List[Tuple[Todo, int]]:
    """Order todos with incomplete ones first, paired with their stored index."""
    indexed = list(enumerate(todos))
    incomplete = [(todo, i) for i, todo in indexed if not todo.completed]
    complete = [(todo, i) for i, todo in indexed if todo.completed]
    return incomplete + complete
