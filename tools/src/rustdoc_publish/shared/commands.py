"""
External command execution.

Every step of the export is an external tool (cargo, pip, ghp-import, git).
Steps receive a runner with the signature of `run_command` so that tests can
record invocations instead of spawning processes.
"""

import shlex
import subprocess
from pathlib import Path
from typing import Callable, Mapping, Sequence

CommandRunner = Callable[..., subprocess.CompletedProcess]


def run_command(
    args: Sequence[str],
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """Run a command and return the result."""
    return subprocess.run(
        list(args),
        cwd=cwd,
        env=dict(env) if env is not None else None,
        capture_output=True,
        text=True,
        check=check,
    )


def format_command(args: Sequence[str]) -> str:
    """Render a command line for display."""
    return " ".join(shlex.quote(str(a)) for a in args)
