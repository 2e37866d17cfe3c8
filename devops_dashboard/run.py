#!/usr/bin/env python3
"""
Development server for the dashboard service.

Usage:
    python -m devops_dashboard.run

Environment variables:
    PORT: Port to bind to (default: 3000)
    HOST: Interface to bind to (default: 0.0.0.0)
    PROJECT_ROOT: Directory to inspect (default: this repository)
"""
import logging

from dotenv import load_dotenv

# Load .env before Config reads the environment.
load_dotenv()

from devops_dashboard.factory import create_app  # noqa: E402

logger = logging.getLogger(__name__)


LOOPBACK_HOST = "127.0.0.1"


def main():
    """Main entry point for the dashboard service."""
    app = create_app()
    host = app.config["HOST"]
    port = app.config["PORT"]
    debug = app.config["DEBUG"]

    # The interactive debugger must never listen on a public interface.
    if debug and host != LOOPBACK_HOST:
        logger.warning(f"Debug mode is on; binding to {LOOPBACK_HOST} instead of {host}")
        host = LOOPBACK_HOST

    logger.info(f"DevOps Git Project server running on port {port}")
    logger.info(f"Health check: http://localhost:{port}/api/health")
    logger.info(f"Project stats: http://localhost:{port}/api/project-stats")
    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    main()
