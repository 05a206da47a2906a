# noxfile.py
from nox_poetry import Session, session

PY_VERSIONS = ["3.11"]
SOURCES = ("src", "tests")


@session(python=PY_VERSIONS)
def format(session: Session) -> None:
    """Auto-format code."""
    session.install("black", "isort")
    session.run("isort", *SOURCES)
    session.run("black", *SOURCES)


@session(python=PY_VERSIONS)
def typecheck_mypy(session: Session) -> None:
    """Type-check the breakplan package (config lives in pyproject.toml)."""
    session.install("mypy", "pytest", "pandas-stubs~=2.2")
    session.install(".")
    session.run("mypy", "--config-file", "pyproject.toml")


@session(python=PY_VERSIONS)
def lint(session: Session) -> None:
    """Run linters/formatters managed by Poetry dev deps."""
    session.install("ruff", "black", "isort")
    session.run("ruff", "check", *SOURCES)
    session.run("isort", "--check-only", *SOURCES)
    session.run("black", "--check", *SOURCES)


@session(python=PY_VERSIONS)
def tests(session: Session) -> None:
    """Run the placement test suite against the installed package."""
    session.install(".", "pytest")
    session.run("pytest", "-q", *session.posargs)
