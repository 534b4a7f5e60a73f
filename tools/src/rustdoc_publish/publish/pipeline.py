"""
Documentation export pipeline.

Runs the export steps in order once the DOC gate is open:

    build -> redirect -> install -> import -> push

When the gate is closed nothing is written and no process is started. Any
failing step raises and halts the sequence; there is no retry.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Sequence

from rustdoc_publish.shared import (
    CommandRunner,
    ExportConfigError,
    ExportEnv,
    get_target_doc_dir,
    prepend_user_bin,
    run_command,
    validate_export_env,
)

from .build import build_docs
from .pages import DEFAULT_BRANCH, build_push_url, import_docs, install_publisher, push_pages
from .redirect import write_redirect

ExportStatus = Literal["skipped", "published", "dry-run"]

STEP_BUILD = "build"
STEP_REDIRECT = "redirect"
STEP_INSTALL = "install"
STEP_IMPORT = "import"
STEP_PUSH = "push"


@dataclass
class ExportResult:
    """Outcome of an export run."""

    status: ExportStatus
    steps: list[str] = field(default_factory=list)
    redirect_path: Path | None = None


def planned_steps(skip_install: bool = False) -> list[str]:
    """Names of the steps an enabled export runs, in order."""
    steps = [STEP_BUILD, STEP_REDIRECT, STEP_INSTALL, STEP_IMPORT, STEP_PUSH]
    if skip_install:
        steps.remove(STEP_INSTALL)
    return steps


def export_docs(
    export_env: ExportEnv,
    root: Path,
    run: CommandRunner = run_command,
    branch: str = DEFAULT_BRANCH,
    skip_install: bool = False,
    cargo_args: Sequence[str] = (),
    dry_run: bool = False,
) -> ExportResult:
    """
    Build and publish the crate documentation.

    Args:
        export_env: Variables read from the CI environment
        root: Crate root (cargo and git run here)
        run: Command runner used for every external tool
        branch: Pages branch to import into and push
        skip_install: Assume ghp-import is already on PATH
        cargo_args: Extra arguments for `cargo doc`
        dry_run: Validate and report the plan without side effects

    Returns:
        ExportResult; status is "skipped" when the gate is closed

    Raises:
        ExportConfigError: gate open but CRATE/TOKEN/TRAVIS_REPO_SLUG invalid
        subprocess.CalledProcessError: an external tool failed
    """
    if not export_env.is_enabled():
        print("DOC is not 'true'; skipping documentation export")
        return ExportResult(status="skipped")

    errors = validate_export_env(export_env)
    if errors:
        raise ExportConfigError(errors)

    doc_dir = get_target_doc_dir(root)

    if dry_run:
        steps = planned_steps(skip_install)
        print(f"Dry run: would run {', '.join(steps)}")
        return ExportResult(status="dry-run", steps=steps, redirect_path=doc_dir / "index.html")

    env = prepend_user_bin()
    result = ExportResult(status="published")

    print("Building documentation (cargo doc)...")
    build_docs(root, run=run, env=env, extra_args=cargo_args)
    result.steps.append(STEP_BUILD)

    result.redirect_path = write_redirect(doc_dir, export_env.crate)
    print(f"  Wrote redirect {result.redirect_path} -> {export_env.crate}/index.html")
    result.steps.append(STEP_REDIRECT)

    if not skip_install:
        print("Installing ghp-import...")
        install_publisher(run=run, env=env)
        result.steps.append(STEP_INSTALL)

    print(f"Importing {doc_dir} into {branch}...")
    import_docs(root, doc_dir, run=run, env=env, branch=branch)
    result.steps.append(STEP_IMPORT)

    print(f"Pushing {branch} to {export_env.repo_slug}...")
    push_pages(
        root,
        build_push_url(export_env.token, export_env.repo_slug),
        run=run,
        env=env,
        branch=branch,
    )
    result.steps.append(STEP_PUSH)

    print("Documentation published")
    return result
