# devops_dashboard/routes/api_routes.py
import http
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

from devops_dashboard.systems.health import get_health_snapshot

api_bp = Blueprint('api_bp', __name__)

PROJECT_FEATURES = [
    'Git version control',
    'Branching strategies',
    'Pull request workflows',
    'Commit conventions',
    'Tagging system',
]

FEATURE_ROADMAP = {
    'completed': [
        'Git repository setup',
        'Branching strategy',
        'Commit conventions',
        'Pull request workflow',
        'Documentation structure',
    ],
    'inProgress': [
        'User authentication',
        'API endpoints',
        'Database integration',
    ],
    'planned': [
        'Admin dashboard',
        'Reporting system',
        'Email notifications',
    ],
}


@api_bp.route('/api', methods=['GET'])
def api_index():
    """Describes the service: version, environment and headline features."""
    return jsonify({
        "message": "Welcome to Task 4 - Version-Controlled DevOps Project!",
        "version": current_app.config["APP_VERSION"],
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": current_app.config["ENVIRONMENT"],
        "features": PROJECT_FEATURES,
    }), http.HTTPStatus.OK


@api_bp.route('/api/health', methods=['GET'])
def health():
    """Liveness check with process uptime and memory usage."""
    return jsonify(get_health_snapshot()), http.HTTPStatus.OK


@api_bp.route('/api/features', methods=['GET'])
def features():
    return jsonify(FEATURE_ROADMAP), http.HTTPStatus.OK
