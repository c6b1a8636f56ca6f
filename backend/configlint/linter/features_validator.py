"""Features Validator — checks every feature entry for a name and a boolean flag."""

from configlint.linter.base import BaseValidator
from configlint.linter.models import Issue, LintRules, ParsedConfig, Severity


class FeaturesValidator(BaseValidator):
    """Validates each entry of the ``features`` sequence independently."""

    @property
    def name(self) -> str:
        return "FeaturesValidator"

    def validate(self, config: ParsedConfig, rules: LintRules) -> list[Issue]:
        issues = []

        for entry in config.features:
            if not entry.fields:
                issues.append(self._issue(
                    line=entry.line,
                    severity=Severity.WARNING,
                    message="each feature entry should be a mapping",
                ))
                continue

            if not self._value(entry.fields, "name"):
                issues.append(self._issue(
                    line=entry.line,
                    severity=Severity.WARNING,
                    message="feature entry missing name",
                    suggested_fix="Add name: <feature-name>",
                ))

            enabled = entry.fields.get("enabled")
            if enabled is None or not self._is_bool(enabled.value):
                issues.append(self._issue(
                    line=entry.line,
                    severity=Severity.WARNING,
                    message="feature enabled should be true or false",
                ))

        return issues
