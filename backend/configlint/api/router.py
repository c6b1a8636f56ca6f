"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from configlint.api.health import router as health_router
from configlint.api.lint import router as lint_router

api_router = APIRouter()

# Health check (public)
api_router.include_router(health_router, tags=["Health"])

# Linting (API key protected when keys are configured)
api_router.include_router(lint_router, tags=["Lint"])
