"""Lint Engine — scans config text and runs the section validators in order.

This is the main entry point for linting. Issues come back category-first
(metadata, settings, features) in rule order, never re-sorted by line.

Usage:
    issues = lint_engine.lint_text(text)
    report = lint_engine.report(text, strict=True)
    if report.fatal:
        ...
"""

import time
from pathlib import Path
from typing import Optional, Union

import structlog

from configlint.linter.base import BaseValidator
from configlint.linter.errors import LintIOError
from configlint.linter.features_validator import FeaturesValidator
from configlint.linter.metadata_validator import MetadataValidator
from configlint.linter.models import DEFAULT_RULES, Issue, LintReport, LintRules
from configlint.linter.scanner import scan_text
from configlint.linter.settings_validator import SettingsValidator

logger = structlog.get_logger()


class LintEngine:
    """Runs the scanner and the fixed validator chain.

    Stateless between calls, so one instance is safe to share across
    threads and requests.
    """

    def __init__(self, rules: Optional[LintRules] = None):
        self.rules = rules or DEFAULT_RULES
        self.validators: tuple[BaseValidator, ...] = (
            MetadataValidator(),
            SettingsValidator(),
            FeaturesValidator(),
        )

    def lint_text(self, text: str) -> list[Issue]:
        """Lint decoded config text and return the ordered issue list."""
        start_time = time.perf_counter()

        config = scan_text(text)

        issues: list[Issue] = []
        for validator in self.validators:
            issues.extend(validator.validate(config, self.rules))

        logger.debug(
            "lint_complete",
            total_issues=len(issues),
            features=len(config.features),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return issues

    def lint_bytes(self, data: bytes) -> list[Issue]:
        """Lint raw bytes. A leading BOM is dropped; invalid UTF-8 is replaced, never rejected."""
        return self.lint_text(data.decode("utf-8-sig", errors="replace"))

    def lint_file(self, path: Union[str, Path]) -> list[Issue]:
        """Read and lint a file.

        Raises:
            LintIOError: the file could not be read
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.warning("config_read_failed", path=str(path), error=str(e))
            raise LintIOError(path, e.strerror or str(e)) from e
        return self.lint_bytes(data)

    def report(self, text: str, strict: bool = False) -> LintReport:
        """Lint text and apply the fatal policy for the given strictness."""
        return LintReport.build(self.lint_text(text), strict=strict)


# Module-level singleton
lint_engine = LintEngine()


def lint_text(text: str, rules: Optional[LintRules] = None) -> list[Issue]:
    engine = lint_engine if rules is None else LintEngine(rules)
    return engine.lint_text(text)


def lint_bytes(data: bytes, rules: Optional[LintRules] = None) -> list[Issue]:
    engine = lint_engine if rules is None else LintEngine(rules)
    return engine.lint_bytes(data)


def lint_file(path: Union[str, Path]) -> list[Issue]:
    return lint_engine.lint_file(path)
