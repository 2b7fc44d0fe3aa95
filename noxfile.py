# topmark:header:start
#
#   project      : MultipartForm
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running Hypothesis property tests (opt-in).
  - `lint`: Ruff lint (pass ``-- --fix`` to autofix).
  - `format_check` / `format`: Verify or apply ruff formatting.
  - `cli_smoke`: Install the wheel and drive the ``multipartform`` CLI end to end.
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Common invocations:
  - `nox` (lint + format_check)
  - `nox -s qa-3.12 -- -k upload`
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)
else:
    import toml

    _toml_loads = cast("Callable[[str], dict[str, Any]]", toml.loads)

ROOT: pathlib.Path = pathlib.Path(__file__).parent
CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"
CLASSIFIER_PREFIX = "Programming Language :: Python :: "

DEV_INSTALL: tuple[str, ...] = ("-e", ".[dev,test]")

# (file name, bytes, --type) used by the cli_smoke session
SMOKE_SAMPLES: tuple[tuple[str, bytes, str], ...] = (
    ("pixel.png", b"\x89PNG\r\n\x1a\n" + b"\x00" * 16, "png"),
    ("report.pdf", b"%PDF-1.7\n%%EOF\n", "pdf"),
    ("table.csv", b"name,city\nJane,Zurich\n", "csv"),
)


def supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions listed in the pyproject classifiers, sorted.

    Falls back to the running interpreter if pyproject.toml cannot be read.
    """
    try:
        project = _toml_loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
        classifiers = cast("list[str]", project["classifiers"])
    except (OSError, ValueError, KeyError) as exc:
        warnings.warn(
            f"Cannot read classifiers from pyproject.toml ({exc}); "
            f"using Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    versions = {
        tuple(int(p) for p in c.removeprefix(CLASSIFIER_PREFIX).split("."))
        for c in classifiers
        if c.startswith(CLASSIFIER_PREFIX) and c.removeprefix(CLASSIFIER_PREFIX).count(".") == 1
    }
    return [f"{major}.{minor}" for major, minor in sorted(versions)] or [CURRENT_PYTHON_VERSION]


PYTHONS: list[str] = supported_pythons()

nox.options.sessions = ["lint", "format_check"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.install(*DEV_INSTALL)

    session.run("pytest", "-q", "tests", "-m", "not slow and not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")
    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    session.install(*DEV_INSTALL)
    session.run("pytest", "-vv", "tests/property", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Ruff lint; extra arguments (e.g. ``--fix``) are passed through."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "check", ".", *session.posargs)


@nox.session
def format_check(session: nox.Session) -> None:
    """Check code formatting."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Format code (auto-fix)."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "format", ".")


@nox.session(python=CURRENT_PYTHON_VERSION)
def cli_smoke(session: nox.Session) -> None:
    """Install the package non-editable and exercise every CLI command."""
    session.install(".")
    tmp = pathlib.Path(session.create_tmp())
    (tmp / "multipartform.toml").write_text("[upload]\nmax_size = 1024\n", encoding="utf-8")
    for name, data, type_name in SMOKE_SAMPLES:
        (tmp / name).write_bytes(data)

    with session.chdir(tmp):
        session.run("multipartform", "version")
        session.run("multipartform", "filetypes", "--format", "ndjson", "--long", silent=True)
        for name, _, type_name in SMOKE_SAMPLES:
            session.run("multipartform", "-v", "check", name, "--type", type_name)
            session.run("multipartform", "detect", name)
        # Mismatch must exit with DATA_ERROR (65)
        session.run("multipartform", "check", "pixel.png", "--type", "jpeg", success_codes=[65])
        session.run("multipartform", "--help", silent=True)


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    session.install(*DEV_INSTALL)
    session.run("python", "-c", "import shutil; shutil.rmtree('dist', ignore_errors=True)")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
