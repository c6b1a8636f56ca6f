"""Settings Validator — checks settings.replicas and settings.timeout."""

from configlint.linter.base import BaseValidator
from configlint.linter.models import Issue, LintRules, ParsedConfig, Severity


class SettingsValidator(BaseValidator):
    """Validates the ``settings`` section.

    A missing or bad replica count is an error. Timeout problems are only
    warnings since the deployment falls back to the default timeout.
    """

    @property
    def name(self) -> str:
        return "SettingsValidator"

    def validate(self, config: ParsedConfig, rules: LintRules) -> list[Issue]:
        issues = []
        fields = config.settings
        anchor = self._anchor(config.settings_line)

        if not fields:
            issues.append(self._issue(
                line=anchor,
                severity=Severity.ERROR,
                message="missing settings section",
                suggested_fix="Add a 'settings' mapping with 'replicas' and 'timeout'",
            ))
            return issues

        replicas = fields.get("replicas")
        if replicas is None:
            issues.append(self._issue(
                line=anchor,
                severity=Severity.ERROR,
                message="settings.replicas is required",
                suggested_fix="Add settings.replicas: 1",
            ))
        elif not self._is_positive_int(replicas.value):
            issues.append(self._issue(
                line=replicas.line,
                severity=Severity.ERROR,
                message="settings.replicas must be a positive integer",
            ))

        timeout = fields.get("timeout")
        if timeout is None:
            issues.append(self._issue(
                line=anchor,
                severity=Severity.WARNING,
                message=f"settings.timeout is missing; defaulting to {rules.default_timeout}",
                suggested_fix=f"Add settings.timeout: {rules.default_timeout}",
            ))
        elif not self._is_positive_int(timeout.value):
            issues.append(self._issue(
                line=timeout.line,
                severity=Severity.WARNING,
                message="settings.timeout should be a positive integer",
            ))

        return issues
