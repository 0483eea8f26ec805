"""
Shared pytest fixtures for digestr tests.

- isolated_environment: every test runs in its own empty directory with no
  DIGESTR_* variables and a fresh service container
- write_file: helper to create input files
- run_digestr: helper to run the digestr CLI via subprocess
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from digestr.core.bootstrap import reset


def _run_digestr_cmd(*args: str, cwd: Path, check: bool = True) -> subprocess.CompletedProcess:
    """Run a digestr command using the current Python interpreter."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("DIGESTR_")}
    env["PYTHONIOENCODING"] = "utf-8"
    result = subprocess.run(
        [sys.executable, "-m", "digestr", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
    )
    if check and result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode,
            [sys.executable, "-m", "digestr", *args],
            result.stdout,
            result.stderr,
        )
    return result


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run each test from an empty working directory with clean state."""
    for key in list(os.environ):
        if key.startswith("DIGESTR_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset()
    yield
    reset()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a helper that writes bytes to tmp_path/<name>."""

    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def run_digestr(tmp_path: Path) -> Callable[..., subprocess.CompletedProcess]:
    """Return a helper that runs `python -m digestr` inside tmp_path."""

    def _run(*args: str, check: bool = True) -> subprocess.CompletedProcess:
        return _run_digestr_cmd(*args, cwd=tmp_path, check=check)

    return _run
