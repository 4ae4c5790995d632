"""
Student API Application Package

FLOW OVERVIEW
- create_app(test_config=None)
  • Build Flask app, apply config (test or env-based), init the DB extension.
  • Register blueprints: main (/), students (/students).
  • Register global JSON error handlers, request metrics and CLI commands.
"""

from flask import Flask
from .models import db
from .routes import main_bp, students_bp
from .config import Config

def create_app(test_config=None):
    """Application factory pattern for production deployment"""
    app = Flask(__name__)

    # Configuration
    if test_config:
        # Use test configuration if provided
        app.config.update(test_config)
    else:
        # Use environment-based configuration
        app.config.from_object(Config())

    app.json.sort_keys = False
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(students_bp, url_prefix='/students')

    # Register error handlers
    from .utils.error_handlers import register_error_handlers
    register_error_handlers(app)

    from .utils.prom_metrics import register_request_metrics
    register_request_metrics(app)

    from .cli import register_commands
    register_commands(app)

    return app
