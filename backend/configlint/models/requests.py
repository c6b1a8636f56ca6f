"""API request models."""

from pydantic import BaseModel, ConfigDict, Field


class LintRequest(BaseModel):
    """Request to lint a config document."""

    model_config = ConfigDict(populate_by_name=True)

    config: str = Field(
        ...,
        description="Raw YAML-like or JSON-like config text",
        examples=[
            "metadata:\n  name: checkout\n  env: prod\n"
            "settings:\n  replicas: 2\n  timeout: 60\n"
            "features:\n  - name: fast-path\n    enabled: true\n"
        ],
    )
    strict: bool = Field(default=False, description="Treat warnings as fatal")
    fix_suggestions: bool = Field(
        default=False,
        alias="fixSuggestions",
        description="Display hint for clients; issues always carry suggestedFix",
    )
