from quart import current_app
from quart import render_template
from werkzeug.exceptions import HTTPException

from todoapp.errors import NotFoundError


def register_error_handlers(app):
    """Register error handlers with the application."""

    @app.errorhandler(Exception)
    async def handle_exception(e):
        current_app.logger.error(f"Unhandled exception: {str(e)}", exc_info=True)
        return "An unexpected error occurred", 500

    @app.errorhandler(HTTPException)
    async def handle_http_exception(e):
        return e.get_response()

    @app.errorhandler(NotFoundError)
    async def handle_missing_item(e):
        current_app.logger.debug(f"Not found: {e.message}")
        return await render_template("404.html", message=e.message), 404

    @app.errorhandler(404)
    async def handle_not_found(e):
        return await render_template("404.html"), 404
