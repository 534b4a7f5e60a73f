"""
Documentation export steps.

The export is a linear sequence of external tool invocations:

1. cargo doc                      (build)
2. target/doc/index.html redirect (redirect)
3. pip install --user ghp-import   (pages.install_publisher)
4. ghp-import -n target/doc        (pages.import_docs)
5. git push -qf <url> gh-pages     (pages.push_pages)

pipeline.export_docs runs them in order behind the DOC gate.
"""

from .redirect import render_redirect, write_redirect, parse_redirect
from .pages import build_push_url, pages_url
from .pipeline import ExportResult, export_docs

__all__ = [
    "render_redirect",
    "write_redirect",
    "parse_redirect",
    "build_push_url",
    "pages_url",
    "ExportResult",
    "export_docs",
]
