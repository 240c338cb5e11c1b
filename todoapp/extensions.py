from quart_compress import Compress

from todoapp.modules.logging_helper import LoggingHelper

# Create instances without initializing
compress = Compress()
logging_helper = LoggingHelper()


def init_extensions(app):
    """Initialize all extensions with the application."""
    logging_helper.init_app(app)
    compress.init_app(app)
