"""Config linter core — line scanner plus fixed-rule section validators.

Usage:
    from configlint.linter import lint_text, is_fatal

    issues = lint_text(config_text)
    if is_fatal(issues, strict=True):
        # Block the deployment
"""

from configlint.linter.engine import LintEngine, lint_bytes, lint_engine, lint_file, lint_text
from configlint.linter.errors import LintIOError
from configlint.linter.models import (
    DEFAULT_RULES,
    Issue,
    LintReport,
    LintRules,
    ParsedConfig,
    Severity,
    is_fatal,
)

__all__ = [
    "LintEngine",
    "lint_engine",
    "lint_text",
    "lint_bytes",
    "lint_file",
    "LintIOError",
    "Issue",
    "LintReport",
    "LintRules",
    "ParsedConfig",
    "Severity",
    "DEFAULT_RULES",
    "is_fatal",
]
