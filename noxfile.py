"""Nox sessions for testing random-org-mcp across multiple Python versions."""

import nox

PYTHONS = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["tests"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def tests(session):
    """Run the unit tests with pytest."""
    session.install(".[dev]")
    session.run("pytest", "tests/", "-q", *session.posargs)


@nox.session(python=PYTHONS)
def type_check(session):
    """Run mypy over the package."""
    session.install(".[dev]")
    session.install("mypy")
    session.run("mypy", "src/random_org_mcp", *session.posargs)


@nox.session(python="3.12")
def smoke(session):
    """Check that the installed entry point starts and reports its version."""
    session.install(".")
    session.run("random-org-mcp", "--version")
