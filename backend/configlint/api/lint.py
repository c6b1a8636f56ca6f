"""Lint API — lint a config document posted as JSON."""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, HTTPException

from configlint.api.auth import require_api_key
from configlint.linter import LintReport, lint_engine
from configlint.models.requests import LintRequest
from configlint.models.responses import ErrorResponse, LintResponse

logger = structlog.get_logger()

router = APIRouter()


@router.post(
    "/lint",
    response_model=LintResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(require_api_key)],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def lint_config(request_body: LintRequest):
    """Lint a config document.

    Sync on purpose: the linter is CPU-only, so FastAPI runs it in the
    threadpool instead of on the event loop.
    """
    if not request_body.config.strip():
        raise HTTPException(status_code=400, detail="Config content cannot be empty")

    report = LintReport.build(
        lint_engine.lint_text(request_body.config),
        strict=request_body.strict,
    )

    logger.info(
        "config_linted",
        config_length=len(request_body.config),
        issues=report.summary,
        strict=report.strict,
        fatal=report.fatal,
    )

    return LintResponse(
        issues=report.issues,
        strict=report.strict,
        fatal=report.fatal,
        generated_at=datetime.now(timezone.utc),
    )
