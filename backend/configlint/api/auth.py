"""API key authentication for the lint endpoint."""

from typing import Optional

import structlog
from fastapi import HTTPException, Request

logger = structlog.get_logger()

BEARER_PREFIX = "Bearer "


def extract_api_key(request: Request) -> Optional[str]:
    """Read the key from ``X-API-Key``, falling back to a Bearer token."""
    key = request.headers.get("X-API-Key")
    if key:
        return key

    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith(BEARER_PREFIX):
        return auth_header[len(BEARER_PREFIX):].strip()

    return None


async def require_api_key(request: Request) -> None:
    """Reject requests without a configured key. No keys configured = open access."""
    allowed = request.app.state.settings.api_keys
    if not allowed:
        return

    key = extract_api_key(request)
    if key not in allowed:
        client_ip = request.client.host if request.client else "unknown"
        logger.warning("auth_failed", ip=client_ip, path=request.url.path)
        raise HTTPException(status_code=401, detail="Unauthorized: Invalid or missing API Key")
