"""
GitHub Pages publishing via ghp-import and git.

ghp-import commits a directory onto the gh-pages branch of the local
repository; the branch is then force-pushed to an authenticated HTTPS remote.
"""

import sys
from pathlib import Path
from typing import Mapping

from rustdoc_publish.shared import CommandRunner, run_command

PUBLISHER_PACKAGE = "ghp-import"
PUBLISHER_COMMAND = "ghp-import"
DEFAULT_BRANCH = "gh-pages"
GITHUB_HOST = "github.com"


def in_virtualenv() -> bool:
    """Check whether the current interpreter runs inside a virtualenv."""
    return sys.prefix != sys.base_prefix


def install_publisher(
    run: CommandRunner = run_command,
    env: Mapping[str, str] | None = None,
    package: str = PUBLISHER_PACKAGE,
    user: bool | None = None,
):
    """
    Install ghp-import with the current interpreter.

    Outside a virtualenv the package goes into the user site (its script lands
    in ~/.local/bin). pip refuses --user inside a virtualenv, so there it is
    installed into the environment itself, whose bin directory is on PATH.
    """
    if user is None:
        user = not in_virtualenv()
    cmd = [sys.executable, "-m", "pip", "install"]
    if user:
        cmd.append("--user")
    cmd.append(package)
    return run(cmd, env=env)


def import_docs(
    root: Path,
    doc_dir: Path,
    run: CommandRunner = run_command,
    env: Mapping[str, str] | None = None,
    branch: str = DEFAULT_BRANCH,
    nojekyll: bool = True,
):
    """Commit doc_dir onto the pages branch of the repository at root."""
    cmd = [PUBLISHER_COMMAND]
    if nojekyll:
        cmd.append("-n")
    if branch != DEFAULT_BRANCH:
        cmd.extend(["-b", branch])
    cmd.append(str(doc_dir))
    return run(cmd, cwd=root, env=env)


def build_push_url(token: str, repo_slug: str) -> str:
    """Build the authenticated push URL. Values are embedded as given."""
    return f"https://{token}@{GITHUB_HOST}/{repo_slug}.git"


def push_pages(
    root: Path,
    push_url: str,
    run: CommandRunner = run_command,
    env: Mapping[str, str] | None = None,
    branch: str = DEFAULT_BRANCH,
):
    """Force-push the pages branch quietly so the URL is not echoed by git."""
    return run(["git", "push", "-qf", push_url, branch], cwd=root, env=env)


def pages_url(repo_slug: str) -> str:
    """Get the GitHub Pages site URL for `owner/repo`."""
    owner, _, repo = repo_slug.partition("/")
    return f"https://{owner}.github.io/{repo}/"
