from quart import Blueprint
from quart import abort
from quart import current_app
from quart import flash
from quart import g
from quart import redirect
from quart import render_template
from quart import request
from quart import url_for

from todoapp.errors import ValidationError
from todoapp.forms import ActionForm
from todoapp.forms import ListForm
from todoapp.forms import TodoForm
from todoapp.forms import TodoStatusForm
from todoapp.modules.list_store import ListStore

lists_bp = Blueprint("lists", __name__)


def _store() -> ListStore:
    return g.list_store


async def _submitted(form_class):
    """Build a form from the request body and check its CSRF token."""
    form = form_class(formdata=await request.form)
    if not form.validate():
        current_app.logger.debug(f"Rejected form submission: {form.errors}")
        abort(400)
    return form


async def _render_list(list_id: int, todo_form=None, status: int = 200):
    todo_list = _store().get_list(list_id)
    return (
        await render_template(
            "list.html",
            todo_list=todo_list,
            list_id=list_id,
            form=todo_form or TodoForm(formdata=None),
            action_form=ActionForm(formdata=None),
        ),
        status,
    )


@lists_bp.route("/lists")
async def index():
    """View all lists."""
    return await render_template(
        "lists.html",
        lists=_store().all_lists(),
        action_form=ActionForm(formdata=None),
    )


@lists_bp.route("/lists/new")
async def new_list():
    """Render the new list form."""
    return await render_template("new_list.html", form=ListForm(formdata=None))


@lists_bp.route("/lists", methods=["POST"])
async def create_list():
    """Create a new list."""
    form = await _submitted(ListForm)

    try:
        _store().create_list(form.list_name.data)
    except ValidationError as e:
        current_app.logger.debug(f"List not created: {e.message}")
        await flash(e.message, "error")
        return await render_template("new_list.html", form=form), 422

    await flash("The list has been created.", "success")
    return redirect(url_for("lists.index"))


@lists_bp.route("/lists/<int:list_id>")
async def show_list(list_id: int):
    """View a single list."""
    return await _render_list(list_id)


@lists_bp.route("/lists/<int:list_id>/edit")
async def edit_list(list_id: int):
    """Render the rename form for an existing list."""
    todo_list = _store().get_list(list_id)
    form = ListForm(formdata=None, list_name=todo_list.name)
    return await render_template(
        "edit_list.html", todo_list=todo_list, list_id=list_id, form=form
    )


@lists_bp.route("/lists/<int:list_id>", methods=["POST"])
async def update_list(list_id: int):
    """Rename an existing list."""
    form = await _submitted(ListForm)

    try:
        _store().rename_list(list_id, form.list_name.data)
    except ValidationError as e:
        current_app.logger.debug(f"List {list_id} not renamed: {e.message}")
        await flash(e.message, "error")
        todo_list = _store().get_list(list_id)
        return (
            await render_template(
                "edit_list.html", todo_list=todo_list, list_id=list_id, form=form
            ),
            422,
        )

    await flash("The list has been updated.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int:list_id>/destroy", methods=["POST"])
async def delete_list(list_id: int):
    """Delete a list."""
    await _submitted(ActionForm)
    _store().delete_list(list_id)

    await flash("The list has been removed.", "success")
    return redirect(url_for("lists.index"))


@lists_bp.route("/lists/<int:list_id>/complete_all", methods=["POST"])
async def complete_all(list_id: int):
    """Mark every todo in a list as completed."""
    await _submitted(ActionForm)
    _store().complete_all_todos(list_id)

    await flash("All todos have been completed.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int:list_id>/todos", methods=["POST"])
async def add_todo(list_id: int):
    """Add a todo to a list."""
    form = await _submitted(TodoForm)

    try:
        _store().add_todo(list_id, form.todo.data)
    except ValidationError as e:
        current_app.logger.debug(f"Todo not added to list {list_id}: {e.message}")
        await flash(e.message, "error")
        return await _render_list(list_id, todo_form=form, status=422)

    await flash("The todo was added.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int:list_id>/todos/<int:todo_id>/destroy", methods=["POST"])
async def delete_todo(list_id: int, todo_id: int):
    """Delete a todo from a list."""
    await _submitted(ActionForm)
    _store().delete_todo(list_id, todo_id)

    await flash("The todo has been deleted.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int:list_id>/todos/<int:todo_id>", methods=["POST"])
async def update_todo(list_id: int, todo_id: int):
    """Mark a todo as completed or not completed."""
    form = await _submitted(TodoStatusForm)
    _store().set_todo_completed(list_id, todo_id, form.is_completed)

    await flash("The todo has been updated.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))
