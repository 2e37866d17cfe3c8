"""
DevOps Git Project dashboard service.

A small Flask service that serves a static dashboard page and read-only
JSON endpoints describing server health, the local Git repository and
the project's files on disk.
"""
__version__ = "1.0.0"
