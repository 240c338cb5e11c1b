"""Routes.py."""

from quart import Blueprint
from quart import redirect
from quart import url_for

from todoapp.blueprints.lists import lists_bp

main_bp = Blueprint("main", __name__)


@main_bp.route("/health")
async def healthcheck():
    """Healthcheck endpoint."""
    return "ok", 200


@main_bp.route("/")
async def index():
    """Send visitors to the overview of their lists."""
    return redirect(url_for("lists.index"))


def register_blueprints(app):
    """Register all blueprints with the application."""
    app.register_blueprint(main_bp)
    app.register_blueprint(lists_bp)
