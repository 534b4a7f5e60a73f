"""
Path utilities for the documentation publishing tools.

Documentation is generated by `cargo doc` under `target/doc/` of the crate
being published. The CI job runs from the crate root, so the current working
directory is the project root unless one is given explicitly.
"""

import os
from pathlib import Path
from typing import Mapping


def get_project_root(root: Path | str | None = None) -> Path:
    """Get the crate root directory (explicit root, else the working directory)."""
    if root is not None:
        return Path(root).resolve()
    return Path.cwd().resolve()


def get_target_doc_dir(root: Path) -> Path:
    """Get the rustdoc output directory."""
    return root / "target" / "doc"


def get_redirect_path(root: Path) -> Path:
    """Get the path of the top-level redirect page."""
    return get_target_doc_dir(root) / "index.html"


def get_user_bin_dir() -> Path:
    """Get the directory where `pip install --user` places console scripts."""
    return Path.home() / ".local" / "bin"


def prepend_user_bin(env: Mapping[str, str] | None = None) -> dict[str, str]:
    """
    Return a copy of env with the user bin directory first on PATH.

    The directory is not added again when it is already the first entry.
    """
    result = dict(os.environ if env is None else env)
    user_bin = str(get_user_bin_dir())
    current = result.get("PATH", "")
    entries = current.split(os.pathsep) if current else []
    if entries and entries[0] == user_bin:
        return result
    result["PATH"] = os.pathsep.join([user_bin] + entries)
    return result
