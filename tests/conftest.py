import pytest
import pytest_asyncio

from todoapp import create_app
from todoapp.models.todo_list import Todo
from todoapp.models.todo_list import TodoList


@pytest_asyncio.fixture
async def app():
    """Create an application for testing."""
    test_config = {
        "TESTING": True,
        "DEBUG": True,
        "SERVER_NAME": "localhost",
        "SECRET_KEY": "test_key",
        "SESSION_COOKIE_SECURE": False,
        "WTF_CSRF_ENABLED": False,  # Disable CSRF for testing
    }
    app = create_app(test_config)

    # Setup app context for testing
    async with app.app_context():
        yield app


@pytest_asyncio.fixture
async def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def session_data():
    """A plain dict standing in for the request session."""
    return {}


@pytest.fixture
def make_list():
    """Build a TodoList from a name and a list of completed flags."""

    def _make_list(name, completed_flags=()):
        todos = [
            Todo(name=f"{name} item {i}", completed=flag)
            for i, flag in enumerate(completed_flags)
        ]
        return TodoList(name=name, todos=todos)

    return _make_list
