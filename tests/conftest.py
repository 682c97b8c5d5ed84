"""Test configuration and fixtures for sigtree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def js_project(tmp_path):
    """Create a small JavaScript project with excluded, hidden and nested entries."""
    root = tmp_path / "project"
    root.mkdir()

    (root / "src").mkdir()
    (root / "src" / "util").mkdir()
    (root / "zzz").mkdir()
    (root / "node_modules").mkdir()
    (root / "node_modules" / "dep").mkdir()
    (root / ".git").mkdir()

    (root / "src" / "math.js").write_text("export function add(a, b) {\n  return a + b;\n}\n")
    (root / "src" / "util" / "strings.js").write_text("export const trim = (s) => s.trim();\n")
    (root / "aaa.js").write_text("function local() {}\n")
    (root / "package.json").write_text('{"name": "demo"}\n')
    (root / "package-lock.json").write_text("{}\n")
    (root / "node_modules" / "dep" / "index.js").write_text("export function dep() {}\n")
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (root / ".env").write_text("SECRET=1\n")

    return root
