"""Run the documentation generator."""

from pathlib import Path
from typing import Mapping, Sequence

from rustdoc_publish.shared import CommandRunner, run_command


def build_docs(
    root: Path,
    run: CommandRunner = run_command,
    env: Mapping[str, str] | None = None,
    cargo: str = "cargo",
    extra_args: Sequence[str] = (),
):
    """Run `cargo doc` in the crate root. Output lands in target/doc/."""
    return run([cargo, "doc", *extra_args], cwd=root, env=env)
