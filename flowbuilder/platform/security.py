from __future__ import annotations

import logging
import secrets

from fastapi import Depends, HTTPException, Request, Security
from fastapi.security import APIKeyHeader

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

api_key_header: APIKeyHeader = APIKeyHeader(
    name="x-api-key", scheme_name="ApiKeyAuth", auto_error=False
)


def verify_api_key(
    request: Request,
    x_api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject requests whose ``x-api-key`` header does not match the configured key."""

    if x_api_key and secrets.compare_digest(
        x_api_key.encode(), settings.api_key.encode()
    ):
        return
    logger.info("Rejected unauthenticated %s %s", request.method, request.url.path)
    raise HTTPException(status_code=401, detail={"error": "Unauthorized"})


__all__ = ["api_key_header", "verify_api_key"]
