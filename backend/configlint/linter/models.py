"""Lint models — severity levels, issues, parsed config structure, and report.

Everything here is created fresh for each lint call and never shared
between calls.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Issue severity levels."""

    ERROR = "error"   # Always fatal
    WARNING = "warn"  # Fatal only in strict mode


class Issue(BaseModel):
    """A single diagnostic finding."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    line: int = Field(ge=1)
    severity: Severity
    message: str
    suggested_fix: Optional[str] = Field(default=None, alias="suggestedFix")

    def to_dict(self) -> dict:
        """Wire shape: camelCase keys, ``suggestedFix`` omitted when absent."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FieldInfo(BaseModel):
    """A scalar value and the line it was last assigned on."""

    value: str
    line: int


class FeatureEntry(BaseModel):
    """One element of the ``features`` sequence."""

    fields: dict[str, FieldInfo] = Field(default_factory=dict)
    line: int


class ParsedConfig(BaseModel):
    """Intermediate structure built by the scanner and consumed by validators.

    ``*_line`` is the line of the section header, 0 when the header was never seen.
    """

    model_config = ConfigDict(frozen=True)

    metadata: dict[str, FieldInfo] = Field(default_factory=dict)
    metadata_line: int = 0
    settings: dict[str, FieldInfo] = Field(default_factory=dict)
    settings_line: int = 0
    features: tuple[FeatureEntry, ...] = ()
    features_line: int = 0


class LintRules(BaseModel):
    """Fixed rule constants shared by the validators."""

    model_config = ConfigDict(frozen=True)

    allowed_environments: tuple[str, ...] = ("dev", "staging", "prod")
    default_timeout: int = 30

    @property
    def environments_label(self) -> str:
        return ", ".join(self.allowed_environments)


DEFAULT_RULES = LintRules()


def is_fatal(issues: list[Issue], strict: bool = False) -> bool:
    """Any error is fatal; warnings are fatal only in strict mode."""
    for issue in issues:
        if issue.severity == Severity.ERROR:
            return True
        if strict and issue.severity == Severity.WARNING:
            return True
    return False


class LintReport(BaseModel):
    """Lint result plus the fatal determination for one caller."""

    issues: list[Issue] = Field(default_factory=list)
    strict: bool = False
    fatal: bool = False

    @property
    def summary(self) -> dict:
        counts = {Severity.ERROR.value: 0, Severity.WARNING.value: 0}
        for issue in self.issues:
            counts[issue.severity] += 1
        return counts

    @classmethod
    def build(cls, issues: list[Issue], strict: bool = False) -> "LintReport":
        return cls(issues=issues, strict=strict, fatal=is_fatal(issues, strict))
