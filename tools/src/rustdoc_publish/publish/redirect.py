"""
Top-level redirect page for rustdoc output.

rustdoc writes one directory per crate under target/doc/ and no index of its
own, so the site root gets a single meta-refresh line pointing at the crate.
"""

import re
from pathlib import Path

from bs4 import BeautifulSoup

REDIRECT_FILENAME = "index.html"

# content="<delay>;url=<target>", with optional spaces and quotes around target
_REFRESH_URL = re.compile(r"^\s*\d*\s*;\s*url\s*=\s*['\"]?([^'\"]*)['\"]?\s*$", re.IGNORECASE)


def render_redirect(crate: str) -> str:
    """Render the redirect line for a crate."""
    return f"<meta http-equiv=refresh content=0;url={crate}/index.html>"


def write_redirect(doc_dir: Path, crate: str) -> Path:
    """Write the redirect page into doc_dir and return its path."""
    doc_dir.mkdir(parents=True, exist_ok=True)
    path = doc_dir / REDIRECT_FILENAME
    path.write_text(render_redirect(crate) + "\n", encoding="utf-8")
    return path


def parse_redirect(html: str) -> str | None:
    """
    Extract the target URL of a meta-refresh redirect.

    Returns None if the document has no refresh tag with a URL.
    """
    soup = BeautifulSoup(html, "html.parser")
    for meta in soup.find_all("meta"):
        if str(meta.get("http-equiv", "")).lower() != "refresh":
            continue
        match = _REFRESH_URL.match(str(meta.get("content", "")))
        if match and match.group(1):
            return match.group(1)
    return None
