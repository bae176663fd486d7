"""
Request Pipeline

Ordered middleware stages wrapped around every request. Each stage is an
async ``(request, call_next)`` callable: it either awaits ``call_next`` to
continue, or returns its own response to short-circuit the rest of the chain.
"""
import logging
from typing import Awaitable, Callable, Sequence
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

logger = logging.getLogger("techhive.pipeline")

CallNext = Callable[[Request], Awaitable[Response]]
Stage = Callable[[Request, CallNext], Awaitable[Response]]

INTERNAL_ERROR_BODY = {"error": "Internal server error."}


async def error_containment(request: Request, call_next: CallNext) -> Response:
    """Turn any fault raised further down the chain into a generic 500."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception(
            f"Unhandled exception occurred while processing {request.method} {request.url.path}"
        )
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


async def request_logging(request: Request, call_next: CallNext) -> Response:
    """Log one line per request once the handler has produced a status."""
    method = request.method
    path = request.url.path

    response = await call_next(request)

    logger.info(f"HTTP {method} {path} => {response.status_code}")
    return response


def install_pipeline(app: FastAPI, stages: Sequence[Stage]) -> None:
    """
    Register ``stages`` on ``app``, outermost first.

    Starlette wraps each newly added middleware around the ones already
    registered, so the list is added in reverse.
    """
    for stage in reversed(stages):
        app.middleware("http")(stage)
