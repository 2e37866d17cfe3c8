import pytest

from devops_dashboard.factory import create_app


@pytest.fixture
def project_root(tmp_path):
    """A small project tree on disk."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("print('hi')\n")
    (tmp_path / "src" / "utils").mkdir()
    (tmp_path / "src" / "utils" / "helpers.PY").write_text("")
    (tmp_path / "README.md").write_text("# readme\n")
    (tmp_path / "Makefile").write_text("all:\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "index.js").write_text("")
    return tmp_path


@pytest.fixture
def app(project_root):
    """Create a test Flask application pointed at the temporary project."""
    test_app = create_app({
        "TESTING": True,
        "PROJECT_ROOT": str(project_root),
        "ENVIRONMENT": "test",
    })
    yield test_app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()
