"""Developer tasks powered by Invoke."""

from __future__ import annotations

import pathlib
import subprocess
from typing import Iterable

from invoke import task

ROOT = pathlib.Path(__file__).parent.resolve()
RESULTS_DIR = ROOT / "results"


def _run(*command: str) -> None:
    subprocess.run(list(command), check=True, cwd=ROOT)


def _pytest(extra: Iterable[str] = ()) -> None:
    RESULTS_DIR.mkdir(exist_ok=True)
    _run("uv", "run", "pytest", "tests/", *extra)


@task
def tests(_context):
    """Run the test suite."""
    _pytest()


@task
def coverage(_context):
    """Run tests under coverage and write reports to results/."""
    _pytest(["--cov=driverstep", "--cov-report=term", f"--cov-report=xml:{RESULTS_DIR / 'coverage.xml'}",
             f"--junitxml={RESULTS_DIR / 'pytest.xml'}"])


@task
def lint(_context):
    """Check formatting and types."""
    _run("uv", "run", "black", "--check", "src", "tests")
    _run("uv", "run", "mypy", "src")


@task
def build(_context):
    """Build distribution artifacts."""
    _run("uv", "build")
