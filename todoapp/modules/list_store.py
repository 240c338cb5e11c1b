"""Session-backed storage for to-do lists.

Lists and todos are addressed by their position. Deleting an item shifts the
position of every item after it down by one.
"""

import logging
from typing import List
from typing import MutableMapping

from todoapp.errors import NotFoundError
from todoapp.models.todo_list import Todo
from todoapp.models.todo_list import TodoList
from todoapp.modules.validation import validate_list_name
from todoapp.modules.validation import validate_todo_text

logger = logging.getLogger(__name__)

SESSION_KEY = "lists"


class ListStore:
    """Reads and mutates the lists held in a client's session.

    Every mutating operation loads the lists, applies the change and writes the
    whole sequence back. Operations that fail raise before anything is written,
    so the session is never left half-updated.
    """

    def __init__(self, session: MutableMapping):
        """Initialise the ListStore.

        Args:
            session: Mapping holding the client's state, usually the Quart
                session for the current request.
        """
        self.session = session

    def _load(self) -> List[TodoList]:
        return [
            TodoList.model_validate(data) for data in self.session.get(SESSION_KEY, [])
        ]

    def _save(self, lists: List[TodoList]) -> None:
        # Reassigning the key marks a cookie session as modified.
        self.session[SESSION_KEY] = [todo_list.model_dump() for todo_list in lists]

    @staticmethod
    def _check_index(index: int, size: int, kind: str) -> None:
        if not 0 <= index < size:
            raise NotFoundError(f"{kind} {index} does not exist.")

    def _list_at(self, lists: List[TodoList], index: int) -> TodoList:
        self._check_index(index, len(lists), "List")
        return lists[index]

    # Lists

    def all_lists(self) -> List[TodoList]:
        """Return every list in insertion order."""
        return self._load()

    def get_list(self, index: int) -> TodoList:
        """Return the list at ``index`` or raise NotFoundError."""
        return self._list_at(self._load(), index)

    def create_list(self, name: str) -> TodoList:
        """Append a new, empty list.

        Raises:
            InvalidLengthError: If the name is empty or too long
            DuplicateNameError: If another list already has this name
        """
        lists = self._load()
        error = validate_list_name(name, lists)
        if error:
            raise error

        todo_list = TodoList(name=name)
        lists.append(todo_list)
        self._save(lists)
        logger.debug(f"Created list {name!r} at index {len(lists) - 1}")
        return todo_list

    def rename_list(self, index: int, new_name: str) -> TodoList:
        """Rename the list at ``index``.

        The list being renamed is left out of the uniqueness check, so keeping
        the current name is allowed.
        """
        lists = self._load()
        todo_list = self._list_at(lists, index)
        others = [other for position, other in enumerate(lists) if position != index]
        error = validate_list_name(new_name, others)
        if error:
            raise error

        old_name = todo_list.name
        todo_list.name = new_name
        self._save(lists)
        logger.debug(f"Renamed list {index} from {old_name!r} to {new_name!r}")
        return todo_list

    def delete_list(self, index: int) -> TodoList:
        """Remove the list at ``index`` and return it."""
        lists = self._load()
        self._check_index(index, len(lists), "List")
        removed = lists.pop(index)
        self._save(lists)
        logger.debug(f"Deleted list {removed.name!r} from index {index}")
        return removed

    def complete_all_todos(self, index: int) -> TodoList:
        """Mark every todo in the list at ``index`` as completed."""
        lists = self._load()
        todo_list = self._list_at(lists, index)
        for todo in todo_list.todos:
            todo.completed = True
        self._save(lists)
        logger.debug(f"Completed {len(todo_list.todos)} todos in list {index}")
        return todo_list

    # Todos

    def get_todo(self, list_index: int, todo_index: int) -> Todo:
        """Return a single todo or raise NotFoundError."""
        todo_list = self.get_list(list_index)
        self._check_index(todo_index, len(todo_list.todos), "Todo")
        return todo_list.todos[todo_index]

    def add_todo(self, list_index: int, text: str) -> Todo:
        """Append a new, incomplete todo to a list.

        Raises:
            NotFoundError: If the list does not exist
            InvalidLengthError: If the text is empty or too long
        """
        lists = self._load()
        todo_list = self._list_at(lists, list_index)
        error = validate_todo_text(text)
        if error:
            raise error

        todo = Todo(name=text)
        todo_list.todos.append(todo)
        self._save(lists)
        logger.debug(f"Added todo {text!r} to list {list_index}")
        return todo

    def delete_todo(self, list_index: int, todo_index: int) -> Todo:
        """Remove a todo from a list and return it."""
        lists = self._load()
        todo_list = self._list_at(lists, list_index)
        self._check_index(todo_index, len(todo_list.todos), "Todo")
        removed = todo_list.todos.pop(todo_index)
        self._save(lists)
        logger.debug(f"Deleted todo {todo_index} from list {list_index}")
        return removed

    def set_todo_completed(
        self, list_index: int, todo_index: int, completed: bool
    ) -> Todo:
        """Set the completed flag of a single todo."""
        lists = self._load()
        todo_list = self._list_at(lists, list_index)
        self._check_index(todo_index, len(todo_list.todos), "Todo")
        todo = todo_list.todos[todo_index]
        todo.completed = completed
        self._save(lists)
        logger.debug(
            f"Set todo {todo_index} in list {list_index} completed={completed}"
        )
        return todo
