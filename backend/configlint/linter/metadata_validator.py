"""Metadata Validator — checks metadata.name and metadata.env."""

from configlint.linter.base import BaseValidator
from configlint.linter.models import Issue, LintRules, ParsedConfig, Severity


class MetadataValidator(BaseValidator):
    """Validates the ``metadata`` section."""

    @property
    def name(self) -> str:
        return "MetadataValidator"

    def validate(self, config: ParsedConfig, rules: LintRules) -> list[Issue]:
        issues = []
        fields = config.metadata
        anchor = self._anchor(config.metadata_line)

        # 1. Section present at all
        if not fields:
            issues.append(self._issue(
                line=anchor,
                severity=Severity.ERROR,
                message="missing metadata section",
                suggested_fix="Add a 'metadata' mapping with 'name' and 'env' fields",
            ))
            return issues

        # 2. Name
        if not self._value(fields, "name"):
            issues.append(self._issue(
                line=self._line(fields, "name", anchor),
                severity=Severity.ERROR,
                message="metadata.name is required",
                suggested_fix="Set metadata.name to a non-empty identifier, e.g. metadata.name: my-service",
            ))

        # 3. Environment
        env = self._value(fields, "env")
        if not env:
            issues.append(self._issue(
                line=self._line(fields, "env", anchor),
                severity=Severity.ERROR,
                message="metadata.env is required",
                suggested_fix=f"Set metadata.env to one of: {rules.environments_label}",
            ))
        elif env not in rules.allowed_environments:
            issues.append(self._issue(
                line=self._line(fields, "env", anchor),
                severity=Severity.WARNING,
                message=f'metadata.env value "{env}" is not recognized',
                suggested_fix=f"Use one of: {rules.environments_label}",
            ))

        return issues
