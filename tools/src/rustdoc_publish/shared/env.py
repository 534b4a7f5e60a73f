"""
CI environment configuration for documentation export.

Variables:
- DOC: gate; the export runs only when the value is exactly "true"
- CRATE: crate name, used for the redirect target `{CRATE}/index.html`
- TOKEN: GitHub token embedded in the push URL
- TRAVIS_REPO_SLUG: target repository as `owner/repo`

Values are used exactly as provided. Validation reports problems but never
rewrites a value.
"""

import os
from dataclasses import dataclass
from typing import Mapping

import jsonschema


GATE_VALUE = "true"
REPO_SLUG_PATTERN = r"^[^/\s]+/[^/\s]+$"

EXPORT_ENV_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Documentation export environment",
    "type": "object",
    "required": ["CRATE", "TOKEN", "TRAVIS_REPO_SLUG"],
    "properties": {
        "DOC": {"type": ["string", "null"]},
        "CRATE": {"type": "string", "minLength": 1},
        "TOKEN": {"type": "string", "minLength": 1},
        "TRAVIS_REPO_SLUG": {"type": "string", "pattern": REPO_SLUG_PATTERN},
    },
}


class ExportConfigError(Exception):
    """Raised when the export is enabled but its environment is incomplete."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


@dataclass
class ExportEnv:
    """Environment variables consumed by the export."""

    doc: str | None = None
    crate: str | None = None
    token: str | None = None
    repo_slug: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "ExportEnv":
        """Read the export variables from environ (default: os.environ)."""
        if environ is None:
            environ = os.environ
        return cls(
            doc=environ.get("DOC"),
            crate=environ.get("CRATE"),
            token=environ.get("TOKEN"),
            repo_slug=environ.get("TRAVIS_REPO_SLUG"),
        )

    def is_enabled(self) -> bool:
        return is_doc_enabled(self.doc)

    def as_dict(self) -> dict:
        """Variables by their environment names; unset variables are omitted."""
        values = {
            "DOC": self.doc,
            "CRATE": self.crate,
            "TOKEN": self.token,
            "TRAVIS_REPO_SLUG": self.repo_slug,
        }
        return {k: v for k, v in values.items() if v is not None}


def is_doc_enabled(value: str | None) -> bool:
    """Check the gate: only the exact string "true" enables the export."""
    return value == GATE_VALUE


def validate_export_env(env: ExportEnv, schema: dict | None = None) -> list[str]:
    """Validate the export variables. Returns list of errors."""
    if schema is None:
        schema = EXPORT_ENV_SCHEMA
    validator = jsonschema.Draft7Validator(schema)
    errors = []
    for error in sorted(validator.iter_errors(env.as_dict()), key=lambda e: list(e.path)):
        if error.path:
            name = ".".join(str(p) for p in error.path)
            # Never echo the token value back
            if name == "TOKEN":
                errors.append("TOKEN: must be a non-empty string")
            else:
                errors.append(f"{name}: {error.message}")
        else:
            errors.append(error.message)
    return errors


def redact(text: str, secret: str | None, placeholder: str = "***") -> str:
    """Replace every occurrence of secret in text."""
    if not secret:
        return text
    return text.replace(secret, placeholder)
