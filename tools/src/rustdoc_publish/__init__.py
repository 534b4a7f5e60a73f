"""
Rust crate documentation publishing tools.

This package builds a crate's rustdoc output and publishes it to the
gh-pages branch of its GitHub repository from CI:

- shared: paths, environment configuration, external command helpers
- publish: build, redirect, gh-pages import/push and the export pipeline
- verify: local and remote checks of the published redirect

Tools:
- export-doc: Build and publish documentation when DOC=true
- verify-doc: Check the redirect locally and on GitHub Pages
"""

__version__ = "0.1.0"
