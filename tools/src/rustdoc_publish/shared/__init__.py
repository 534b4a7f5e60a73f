"""
Shared utilities for the documentation publishing tools.

Modules:
- paths: Project root, target/doc layout and PATH handling
- env: CI environment variables, gate check and validation
- commands: External process execution
"""

from .paths import (
    get_project_root,
    get_target_doc_dir,
    get_redirect_path,
    get_user_bin_dir,
    prepend_user_bin,
)

from .env import (
    GATE_VALUE,
    REPO_SLUG_PATTERN,
    EXPORT_ENV_SCHEMA,
    ExportEnv,
    ExportConfigError,
    is_doc_enabled,
    validate_export_env,
    redact,
)

from .commands import (
    CommandRunner,
    run_command,
    format_command,
)

__all__ = [
    # paths
    "get_project_root",
    "get_target_doc_dir",
    "get_redirect_path",
    "get_user_bin_dir",
    "prepend_user_bin",
    # env
    "GATE_VALUE",
    "REPO_SLUG_PATTERN",
    "EXPORT_ENV_SCHEMA",
    "ExportEnv",
    "ExportConfigError",
    "is_doc_enabled",
    "validate_export_env",
    "redact",
    # commands
    "CommandRunner",
    "run_command",
    "format_command",
]
