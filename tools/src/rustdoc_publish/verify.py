#!/usr/bin/env python3
"""
verify-doc: Check the documentation redirect locally and on GitHub Pages.

Local check: target/doc/index.html exists, is a meta-refresh redirect to
`{CRATE}/index.html`, and the crate index it points at exists.

Remote check (--remote): fetches https://<owner>.github.io/<repo>/ and checks
the served page redirects to the crate the same way.

Usage:
    uv run verify-doc                         # Local check, crate from $CRATE
    uv run verify-doc --crate mycrate
    uv run verify-doc --remote                # Also check the published site
    uv run verify-doc --remote --repo owner/repo
"""

import argparse
import os
import re
import sys
from pathlib import Path

import httpx

from rustdoc_publish.publish.pages import pages_url
from rustdoc_publish.publish.redirect import parse_redirect
from rustdoc_publish.shared import (
    REPO_SLUG_PATTERN,
    get_project_root,
    get_redirect_path,
    get_target_doc_dir,
)

REQUEST_TIMEOUT = 30.0


def expected_target(crate: str) -> str:
    return f"{crate}/index.html"


def check_redirect_html(html: str, crate: str) -> list[str]:
    """Check a redirect document points at the crate. Returns list of problems."""
    target = parse_redirect(html)
    if target is None:
        return ["No meta refresh redirect found"]
    if target != expected_target(crate):
        return [f"Redirect points at '{target}', expected '{expected_target(crate)}'"]
    return []


def check_local(root: Path, crate: str) -> list[str]:
    """Check the generated redirect and crate index under target/doc/."""
    redirect_path = get_redirect_path(root)
    if not redirect_path.exists():
        return [f"Redirect file not found: {redirect_path}"]

    problems = check_redirect_html(redirect_path.read_text(encoding="utf-8"), crate)

    crate_index = get_target_doc_dir(root) / expected_target(crate)
    if not crate_index.exists():
        problems.append(f"Crate index not found: {crate_index}")
    return problems


def check_published(repo_slug: str, crate: str, client: httpx.Client | None = None) -> list[str]:
    """Fetch the Pages site root and check its redirect."""
    url = pages_url(repo_slug)
    owns_client = client is None
    if client is None:
        client = httpx.Client(follow_redirects=True, timeout=REQUEST_TIMEOUT)
    try:
        response = client.get(url)
        if response.status_code != 200:
            return [f"GET {url} returned HTTP {response.status_code}"]
        problems = check_redirect_html(response.text, crate)
        if problems:
            return problems

        crate_url = url + expected_target(crate)
        crate_response = client.get(crate_url)
        if crate_response.status_code != 200:
            return [f"GET {crate_url} returned HTTP {crate_response.status_code}"]
        return []
    except httpx.HTTPError as e:
        return [f"Request to {url} failed: {e}"]
    finally:
        if owns_client:
            client.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check the documentation redirect locally and on GitHub Pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Crate root (default: current directory)",
    )
    parser.add_argument(
        "--crate",
        type=str,
        default=os.environ.get("CRATE"),
        help="Crate name (default: $CRATE)",
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Also check the published GitHub Pages site",
    )
    parser.add_argument(
        "--repo",
        type=str,
        default=os.environ.get("TRAVIS_REPO_SLUG"),
        help="Repository as owner/repo (default: $TRAVIS_REPO_SLUG)",
    )

    args = parser.parse_args(argv)

    if not args.crate:
        print("ERROR: No crate given (use --crate or set CRATE)", file=sys.stderr)
        return 2
    if args.remote and not args.repo:
        print("ERROR: --remote needs --repo or TRAVIS_REPO_SLUG", file=sys.stderr)
        return 2
    if args.remote and not re.match(REPO_SLUG_PATTERN, args.repo):
        print(f"ERROR: Repository must be owner/repo, got '{args.repo}'", file=sys.stderr)
        return 2

    root = get_project_root(args.root)
    problems = []

    print(f"Checking {get_redirect_path(root)}...")
    local = check_local(root, args.crate)
    problems.extend(local)
    print("  OK" if not local else f"  {len(local)} problem(s)")

    if args.remote:
        print(f"Checking {pages_url(args.repo)}...")
        remote = check_published(args.repo, args.crate)
        problems.extend(remote)
        print("  OK" if not remote else f"  {len(remote)} problem(s)")

    for problem in problems:
        print(f"ERROR: {problem}", file=sys.stderr)

    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
