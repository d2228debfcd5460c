"""Test configuration and fixtures for localingest."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_repo(tmp_path):
    """Create the small repository used throughout the snapshot tests.

    Layout:
        readme.md         "Hi"
        .git/HEAD         (pruned)
        src/main.ext      "code"
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / "readme.md").write_text("Hi")
    (repo / ".git").mkdir()
    (repo / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (repo / "src").mkdir()
    (repo / "src" / "main.ext").write_text("code")
    return repo
