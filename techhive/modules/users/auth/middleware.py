"""
Authentication Middleware

Shared-secret bearer token check, installed as one stage of the request
pipeline. Denials are answered here directly and never treated as faults.
"""
import logging
import secrets
from typing import Iterable, Mapping, Optional
from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("techhive.users.auth")

BEARER_PREFIX = "bearer "
FALLBACK_TOKEN_HEADER = "x-api-token"
UNAUTHORIZED_BODY = {"error": "Unauthorized. Invalid or missing token."}


def is_documentation_path(path: str, prefixes: Iterable[str]) -> bool:
    return any(path.startswith(prefix) for prefix in prefixes)


def extract_token(headers: Mapping[str, str]) -> Optional[str]:
    """
    Pull the presented token from ``Authorization: Bearer <token>``, or from
    the X-API-TOKEN header when the Authorization header yields nothing.
    """
    token = None
    auth_header = headers.get("authorization")
    if auth_header and auth_header.strip() and auth_header.lower().startswith(BEARER_PREFIX):
        token = auth_header[len(BEARER_PREFIX):].strip()

    if not token:
        token = headers.get(FALLBACK_TOKEN_HEADER)

    if token is None or not token.strip():
        return None
    return token


def is_authorized(token: Optional[str], expected_token: str) -> bool:
    """Exact, case-sensitive comparison against the configured token."""
    if token is None:
        return False
    return secrets.compare_digest(token.encode("utf-8"), expected_token.encode("utf-8"))


async def token_authentication(request: Request, call_next):
    """
    Pipeline stage: reject requests without the configured token.

    The request-logging stage sits inside this one, so a rejected request is
    only recorded by the warning below.
    """
    settings = request.app.state.settings
    path = request.url.path

    if is_documentation_path(path, settings.docs_path_prefixes):
        return await call_next(request)

    token = extract_token(request.headers)
    if not is_authorized(token, settings.auth_token):
        logger.warning(f"Unauthorized request blocked: {request.method} {path} - Missing/Invalid token")
        return JSONResponse(status_code=401, content=UNAUTHORIZED_BODY)

    return await call_next(request)
