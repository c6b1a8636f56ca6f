"""Base validator — one subclass per config section.

Contract:
    - validate() is deterministic: same input → same output
    - validate() returns issues in rule order (empty = no issues)
    - no I/O, no shared mutable state
"""

from abc import ABC, abstractmethod
from typing import Optional

from configlint.linter.models import FieldInfo, Issue, LintRules, ParsedConfig, Severity


class BaseValidator(ABC):
    """Abstract base for section validators."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, config: ParsedConfig, rules: LintRules) -> list[Issue]:
        """Run this section's rules against the parsed config.

        Args:
            config: Output of the section scanner
            rules: Fixed rule constants (allowed environments, default timeout)

        Returns:
            List of Issue findings (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _issue(
        self,
        line: int,
        severity: Severity,
        message: str,
        suggested_fix: Optional[str] = None,
    ) -> Issue:
        """Convenience method to create an Issue."""
        return Issue(line=line, severity=severity, message=message, suggested_fix=suggested_fix)

    @staticmethod
    def _anchor(section_line: int) -> int:
        """Section header line, or 1 when the header was never seen."""
        return section_line or 1

    @staticmethod
    def _value(fields: dict[str, FieldInfo], key: str) -> str:
        """Field value, or empty string when absent."""
        info = fields.get(key)
        return info.value if info is not None else ""

    @staticmethod
    def _line(fields: dict[str, FieldInfo], key: str, fallback: int) -> int:
        info = fields.get(key)
        return info.line if info is not None else fallback

    @staticmethod
    def _is_positive_int(value: str) -> bool:
        """Base-10 integer strictly greater than zero."""
        text = value.strip()
        if text.startswith("+"):
            text = text[1:]
        if not text or not (text.isascii() and text.isdigit()):
            return False
        # Positive iff some digit is nonzero; no int() conversion for huge values
        return text.lstrip("0") != ""

    @staticmethod
    def _is_bool(value: str) -> bool:
        return value.strip().lower() in ("true", "false")
