"""Nox sessions for testing across multiple Python versions."""

import nox

# Test against Python 3.10 through 3.13
nox.options.sessions = ["tests"]
nox.options.default_venv_backend = "uv"


@nox.session(python=["3.10", "3.11", "3.12", "3.13"])
def tests(session):
    """Run the test suite with pytest."""
    session.install(".[dev]")
    session.run("pytest", "tests/", "-q", *session.posargs)


@nox.session(python=["3.10", "3.11", "3.12", "3.13"])
def type_check(session):
    """Run mypy type checking."""
    session.install(".[dev]")
    session.run("mypy", "src/dropstream", *session.posargs)


@nox.session(python="3.12")
def coverage(session):
    """Run the test suite with coverage reporting."""
    session.install(".[dev]")
    session.run(
        "pytest",
        "tests/",
        "-q",
        "--cov=dropstream",
        "--cov-report=term-missing",
        *session.posargs,
    )
