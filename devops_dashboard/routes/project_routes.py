# devops_dashboard/routes/project_routes.py
import http
import logging

from flask import Blueprint, current_app, jsonify, request

from devops_dashboard.systems import inventory_scanner, vcs_reader

logger = logging.getLogger(__name__)

project_bp = Blueprint('project_bp', __name__)

DEFAULT_COMMIT_LIMIT = 5


def _git_options():
    return {
        "repo_path": current_app.config["PROJECT_ROOT"],
        "git_executable": current_app.config["GIT_EXECUTABLE"],
    }


@project_bp.route('/api/git-info', methods=['GET'])
def git_info():
    """
    Current branch, short HEAD hash, last author and last commit date.

    A missing git binary or a non-repository still answers 200 with a
    fallback record; only an unexpected fault yields 500.
    """
    try:
        status = vcs_reader.read_repository_status(
            repository_label=current_app.config["REPOSITORY_LABEL"],
            fallback_author=current_app.config["FALLBACK_AUTHOR"],
            **_git_options(),
        )
        return jsonify(status.to_dict()), http.HTTPStatus.OK
    except Exception as e:
        logger.error(f"Error reading Git information: {e}", exc_info=True)
        return jsonify({"error": "Failed to get Git information"}), http.HTTPStatus.INTERNAL_SERVER_ERROR


@project_bp.route('/api/project-stats', methods=['GET'])
def project_stats():
    """File counts by extension and the directory listing of the project root."""
    try:
        stats = inventory_scanner.get_project_stats(current_app.config["PROJECT_ROOT"])
        return jsonify(stats.to_dict()), http.HTTPStatus.OK
    except Exception as e:
        logger.error(f"Error collecting project statistics: {e}", exc_info=True)
        return jsonify({"error": "Failed to get project statistics"}), http.HTTPStatus.INTERNAL_SERVER_ERROR


@project_bp.route('/api/branches', methods=['GET'])
def branches():
    names = vcs_reader.get_branches(**_git_options())
    return jsonify({"count": len(names), "branches": names}), http.HTTPStatus.OK


@project_bp.route('/api/commits', methods=['GET'])
def recent_commits():
    """
    Recent commit summaries in one-line form.

    Query parameters:
        limit: Number of commits to return (default: 5, capped by MAX_COMMIT_LIMIT)
    """
    try:
        limit = int(request.args.get('limit', DEFAULT_COMMIT_LIMIT))
        if limit < 1:
            raise ValueError(limit)
    except (TypeError, ValueError):
        return jsonify({"error": "Invalid 'limit' parameter"}), http.HTTPStatus.BAD_REQUEST
    limit = min(limit, current_app.config["MAX_COMMIT_LIMIT"])

    commits = vcs_reader.get_recent_commits(limit, **_git_options())
    return jsonify({"count": len(commits), "limit": limit, "commits": commits}), http.HTTPStatus.OK
