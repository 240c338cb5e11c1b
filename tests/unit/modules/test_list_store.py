"""Unit tests for the session-backed list store."""

import pytest

from todoapp.errors import DuplicateNameError
from todoapp.errors import InvalidLengthError
from todoapp.errors import NotFoundError
from todoapp.modules.list_store import SESSION_KEY
from todoapp.modules.list_store import ListStore
from todoapp.modules.presentation import is_list_complete
from todoapp.modules.presentation import remaining_count


@pytest.fixture
def store(session_data):
    return ListStore(session_data)


@pytest.fixture
def three_lists(store):
    for name in ("Groceries", "Chores", "Errands"):
        store.create_list(name)
    return store


class TestLists:
    """Test list creation, lookup, renaming and deletion."""

    def test_empty_session_has_no_lists(self, store):
        assert store.all_lists() == []

    def test_create_list_appends_in_order(self, three_lists):
        names = [todo_list.name for todo_list in three_lists.all_lists()]

        assert names == ["Groceries", "Chores", "Errands"]

    def test_create_list_writes_plain_data_to_session(self, store, session_data):
        store.create_list("Groceries")

        assert session_data[SESSION_KEY] == [{"name": "Groceries", "todos": []}]

    @pytest.mark.parametrize("name", ["", "x" * 101])
    def test_create_list_with_invalid_length_leaves_state_unchanged(
        self, three_lists, session_data, name
    ):
        before = list(session_data[SESSION_KEY])

        with pytest.raises(InvalidLengthError):
            three_lists.create_list(name)

        assert session_data[SESSION_KEY] == before

    def test_create_duplicate_list_fails(self, store):
        store.create_list("Groceries")

        with pytest.raises(DuplicateNameError):
            store.create_list("Groceries")

        assert len(store.all_lists()) == 1

    def test_get_list(self, three_lists):
        assert three_lists.get_list(1).name == "Chores"

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_list_out_of_range(self, three_lists, index):
        with pytest.raises(NotFoundError):
            three_lists.get_list(index)

    def test_rename_list(self, three_lists):
        three_lists.rename_list(0, "Shopping")

        assert three_lists.get_list(0).name == "Shopping"

    def test_rename_list_to_its_own_name(self, three_lists):
        three_lists.rename_list(1, "Chores")

        assert three_lists.get_list(1).name == "Chores"

    def test_rename_list_to_another_lists_name_fails(self, three_lists):
        with pytest.raises(DuplicateNameError):
            three_lists.rename_list(1, "Errands")

        assert three_lists.get_list(1).name == "Chores"

    def test_rename_list_with_invalid_length_fails(self, three_lists):
        with pytest.raises(InvalidLengthError):
            three_lists.rename_list(0, "")

        assert three_lists.get_list(0).name == "Groceries"

    def test_rename_missing_list(self, three_lists):
        with pytest.raises(NotFoundError):
            three_lists.rename_list(5, "Anything")

    def test_rename_keeps_todos(self, three_lists):
        three_lists.add_todo(0, "Milk")

        three_lists.rename_list(0, "Shopping")

        assert [todo.name for todo in three_lists.get_list(0).todos] == ["Milk"]

    def test_delete_list_shifts_later_lists(self, three_lists):
        removed = three_lists.delete_list(1)

        assert removed.name == "Chores"
        names = [todo_list.name for todo_list in three_lists.all_lists()]
        assert names == ["Groceries", "Errands"]

    def test_delete_missing_list(self, three_lists):
        with pytest.raises(NotFoundError):
            three_lists.delete_list(3)

        assert len(three_lists.all_lists()) == 3

    def test_deleted_name_can_be_reused(self, three_lists):
        three_lists.delete_list(0)

        three_lists.create_list("Groceries")

        assert three_lists.get_list(2).name == "Groceries"


class TestTodos:
    """Test adding, completing and deleting todos within a list."""

    @pytest.fixture
    def chores(self, store):
        store.create_list("Chores")
        for text in ("Wash dishes", "Vacuum", "Laundry"):
            store.add_todo(0, text)
        return store

    def test_add_todo_appends_incomplete_todo(self, store):
        store.create_list("Chores")

        todo = store.add_todo(0, "Wash dishes")

        assert todo.name == "Wash dishes"
        assert todo.completed is False
        assert store.get_todo(0, 0) == todo

    def test_add_todo_allows_duplicates(self, chores):
        chores.add_todo(0, "Vacuum")

        assert [todo.name for todo in chores.get_list(0).todos].count("Vacuum") == 2

    def test_add_todo_to_missing_list(self, store):
        with pytest.raises(NotFoundError):
            store.add_todo(0, "Wash dishes")

    def test_add_todo_too_long_leaves_list_unchanged(self, chores):
        with pytest.raises(InvalidLengthError):
            chores.add_todo(0, "x" * 101)

        assert len(chores.get_list(0).todos) == 3

    def test_delete_todo_shifts_later_todos(self, chores):
        removed = chores.delete_todo(0, 0)

        assert removed.name == "Wash dishes"
        assert [todo.name for todo in chores.get_list(0).todos] == [
            "Vacuum",
            "Laundry",
        ]

    @pytest.mark.parametrize("list_index,todo_index", [(1, 0), (0, 3), (0, -1)])
    def test_delete_todo_with_bad_index(self, chores, list_index, todo_index):
        with pytest.raises(NotFoundError):
            chores.delete_todo(list_index, todo_index)

        assert len(chores.get_list(0).todos) == 3

    def test_set_todo_completed(self, chores):
        chores.set_todo_completed(0, 1, True)
        assert chores.get_todo(0, 1).completed is True

        chores.set_todo_completed(0, 1, False)
        assert chores.get_todo(0, 1).completed is False

    def test_set_todo_completed_with_bad_index(self, chores):
        with pytest.raises(NotFoundError):
            chores.set_todo_completed(0, 7, True)

    def test_get_todo_with_bad_index(self, chores):
        with pytest.raises(NotFoundError):
            chores.get_todo(0, 3)

    def test_complete_all_todos(self, chores):
        chores.complete_all_todos(0)

        assert all(todo.completed for todo in chores.get_list(0).todos)

    def test_complete_all_todos_on_missing_list(self, chores):
        with pytest.raises(NotFoundError):
            chores.complete_all_todos(1)

    def test_complete_all_on_empty_list_keeps_it_incomplete(self, store):
        store.create_list("Empty")

        store.complete_all_todos(0)

        assert is_list_complete(store.get_list(0)) is False


def test_complete_single_todo_completes_list(store):
    """Create a list, add one todo and complete it."""
    store.create_list("Chores")
    store.add_todo(0, "Wash dishes")

    store.set_todo_completed(0, 0, True)

    chores = store.get_list(0)
    assert remaining_count(chores) == 0
    assert is_list_complete(chores) is True


def test_store_reads_existing_session_data():
    """A store picks up lists written by an earlier request."""
    session = {
        SESSION_KEY: [
            {"name": "Chores", "todos": [{"name": "Vacuum", "completed": True}]}
        ]
    }

    store = ListStore(session)

    assert store.get_todo(0, 0).completed is True
