#!/usr/bin/env python3
"""
export-doc: Build rustdoc output and publish it to GitHub Pages.

Runs only when DOC=true. Reads CRATE, TOKEN and TRAVIS_REPO_SLUG from the
environment, builds with `cargo doc`, writes target/doc/index.html redirecting
to the crate, commits target/doc onto gh-pages with ghp-import and
force-pushes the branch.

Usage:
    uv run export-doc                       # From the crate root in CI
    uv run export-doc --root path/to/crate
    uv run export-doc --skip-install        # ghp-import already installed
    uv run export-doc --cargo-arg=--no-deps
    uv run export-doc --dry-run             # Check config, print the plan

Exit codes:
    0  skipped (DOC is not 'true') or published
    1  an external tool failed
    2  configuration error
"""

import argparse
import subprocess
import sys

from rustdoc_publish.shared import (
    ExportConfigError,
    ExportEnv,
    format_command,
    get_project_root,
    redact,
)

from .pages import DEFAULT_BRANCH
from .pipeline import export_docs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build and publish crate documentation to GitHub Pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
    DOC               Must be exactly 'true' for anything to happen
    CRATE             Crate directory under target/doc/ to redirect to
    TOKEN             GitHub token used in the push URL
    TRAVIS_REPO_SLUG  Target repository (owner/repo)
        """,
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Crate root (default: current directory)",
    )
    parser.add_argument(
        "--branch",
        type=str,
        default=DEFAULT_BRANCH,
        help=f"Pages branch (default: {DEFAULT_BRANCH})",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not pip install ghp-import",
    )
    parser.add_argument(
        "--cargo-arg",
        action="append",
        default=[],
        dest="cargo_args",
        help="Extra argument for cargo doc (repeatable)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate configuration and print the steps without running them",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    export_env = ExportEnv.from_environ()
    root = get_project_root(args.root)

    try:
        export_docs(
            export_env,
            root,
            branch=args.branch,
            skip_install=args.skip_install,
            cargo_args=args.cargo_args,
            dry_run=args.dry_run,
        )
    except ExportConfigError as e:
        print("ERROR: Invalid export configuration:", file=sys.stderr)
        for error in e.errors:
            print(f"  - {error}", file=sys.stderr)
        return 2
    except subprocess.CalledProcessError as e:
        token = export_env.token
        command = format_command([redact(str(arg), token) for arg in e.cmd])
        print(f"ERROR: Command failed ({e.returncode}): {command}", file=sys.stderr)
        # Tools differ in which stream carries the diagnostics
        for output in (e.stdout, e.stderr):
            if output:
                print(redact(output.rstrip(), token), file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
