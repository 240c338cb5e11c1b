import quart_flask_patch  # noqa - this has to be imported before Quart.
from quart import Quart
from quart import g
from quart import session

from todoapp.modules.list_store import SESSION_KEY
from todoapp.modules.list_store import ListStore


def create_app(config=None):
    """Create and configure the Quart application."""
    app = Quart(__name__)

    # Add Jinja extensions
    app.jinja_env.add_extension("jinja2.ext.loopcontrols")
    app.jinja_env.lstrip_blocks = True
    app.jinja_env.trim_blocks = True

    # Load default configuration
    app.config.from_object("todoapp.config.Config")

    # Apply config overrides
    if config:
        if isinstance(config, dict):
            app.config.update(config)
        else:
            app.config.from_object(config)

    # Initialize Sentry if DSN is configured and not in debug mode
    if app.config.get("SENTRY_DSN") and not app.config.get("DEBUG"):
        import sentry_sdk

        sentry_sdk.init(dsn=app.config["SENTRY_DSN"])

    # Initialize extensions (each extension has init_app)
    from todoapp.extensions import init_extensions

    init_extensions(app)

    # Register template filters
    from todoapp.jinja_filters import register_filters

    register_filters(app)

    # Register blueprints
    from todoapp.routes import register_blueprints

    register_blueprints(app)

    # Register error handlers
    from todoapp.error_handlers import register_error_handlers

    register_error_handlers(app)

    @app.before_request
    def setup_session():
        """Set up session before each request.

        Make the session permanent, make sure it holds a list collection and
        expose a store bound to it as ``g.list_store``.
        """
        session.permanent = True
        if SESSION_KEY not in session:
            session[SESSION_KEY] = []
        g.list_store = ListStore(session)

    return app
