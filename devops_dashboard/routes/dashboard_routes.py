# devops_dashboard/routes/dashboard_routes.py
from flask import Blueprint, current_app, send_from_directory

dashboard_bp = Blueprint('dashboard_bp', __name__)


@dashboard_bp.route('/', methods=['GET'])
def index():
    """Serves the static dashboard page."""
    return send_from_directory(current_app.static_folder, 'index.html')
