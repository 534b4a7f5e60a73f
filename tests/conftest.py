from __future__ import annotations

import subprocess
from pathlib import Path

import pytest


class RecordingRunner:
    """Records commands instead of running them; optionally fails on one tool."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[dict] = []
        self.fail_on = fail_on

    def __call__(self, args, cwd=None, env=None, check=True):
        args = list(args)
        self.calls.append({"args": args, "cwd": cwd, "env": env})
        if self.fail_on is not None and args[0] == self.fail_on:
            raise subprocess.CalledProcessError(1, args, output="", stderr=f"{self.fail_on} failed")
        return subprocess.CompletedProcess(args, 0, stdout="", stderr="")

    @property
    def commands(self) -> list[list[str]]:
        return [c["args"] for c in self.calls]


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def crate_root(tmp_path: Path) -> Path:
    root = tmp_path / "crate"
    root.mkdir()
    return root


@pytest.fixture
def ci_environ() -> dict[str, str]:
    return {
        "DOC": "true",
        "CRATE": "strtpl",
        "TOKEN": "ghp_secret123",
        "TRAVIS_REPO_SLUG": "octo/strtpl",
    }
