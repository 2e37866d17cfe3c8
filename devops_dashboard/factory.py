import logging

from flask import Flask, jsonify, request

from devops_dashboard.config import Config
from devops_dashboard.extensions import cors
from devops_dashboard.routes import register_routes

logger = logging.getLogger(__name__)

CONTENT_SECURITY_POLICY = "; ".join([
    "default-src 'self'",
    "style-src 'self' 'unsafe-inline'",
    "script-src 'self' 'unsafe-inline'",
])

SECURITY_HEADERS = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "X-Frame-Options": "SAMEORIGIN",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "0",
    "Referrer-Policy": "no-referrer",
}


def create_app(config_overrides=None):
    """
    Creates and configures the dashboard Flask application.

    Args:
        config_overrides: optional mapping applied on top of Config

    Returns:
        Flask application instance
    """
    app = Flask(__name__, static_folder="static", static_url_path="/static")
    app.config.from_object(Config)
    if config_overrides:
        app.config.from_mapping(config_overrides)
    app.json.sort_keys = False

    logging.basicConfig(level=app.config["LOG_LEVEL"], format=app.config["LOG_FORMAT"])
    logger.info(f"Dashboard configured for {app.config['ENVIRONMENT']} (project root: {app.config['PROJECT_ROOT']}).")

    # Initialize Flask extensions
    cors.init_app(app, origins=app.config["CORS_ORIGINS"])

    @app.after_request
    def apply_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.after_request
    def log_request(response):
        logger.info(
            f'{request.remote_addr} - "{request.method} {request.full_path.rstrip("?")}" '
            f'{response.status_code} "{request.headers.get("User-Agent", "-")}"'
        )
        return response

    # ===== Error handlers =====
    @app.errorhandler(404)
    def handle_not_found(e):
        logger.warning(f"404 Not Found: {request.path}")
        return jsonify(error="Not Found", message="The requested resource was not found"), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(e):
        return jsonify(
            error="Method Not Allowed",
            message=f"{request.method} is not supported for {request.path}",
        ), 405

    @app.errorhandler(500)
    def handle_internal_error(e):
        original = getattr(e, "original_exception", None) or e
        logger.error(f"500 Internal Server Error on {request.path}: {original}", exc_info=original)
        message = str(original) if app.config["ENVIRONMENT"] == "development" else "Internal server error"
        return jsonify(error="Something went wrong!", message=message), 500

    register_routes(app)

    logger.info("Dashboard app created successfully!")
    return app
