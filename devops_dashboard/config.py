import os
from pathlib import Path

from devops_dashboard import __version__

_DEFAULT_PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Config:
    """
    Configuration for the dashboard service.
    Reads settings from environment variables, with sensible defaults.
    """

    # --- General ---
    ENVIRONMENT = (os.environ.get("APP_ENV") or os.environ.get("FLASK_ENV") or "development").lower()
    DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
    APP_VERSION = __version__

    # --- Server ---
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", 3000))

    # --- Logging ---
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # --- Project introspection ---
    PROJECT_ROOT = os.environ.get("PROJECT_ROOT", str(_DEFAULT_PROJECT_ROOT))
    REPOSITORY_LABEL = os.environ.get("REPOSITORY_LABEL", "Elevate-labs")
    FALLBACK_AUTHOR = os.environ.get("FALLBACK_AUTHOR", "tohidhanfi")
    GIT_EXECUTABLE = os.environ.get("GIT_EXECUTABLE", "git")
    MAX_COMMIT_LIMIT = 50

    # --- CORS Origins ---
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]
