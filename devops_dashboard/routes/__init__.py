# devops_dashboard/routes/__init__.py
"""
This module imports all blueprint instances from the route modules
and provides a function to register them on the Flask app.
"""
import logging
from flask import Flask

from .api_routes import api_bp
from .dashboard_routes import dashboard_bp
from .project_routes import project_bp

logger = logging.getLogger(__name__)


def register_routes(app: Flask):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(project_bp)

    logger.info("All application blueprints registered.")
