"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, get_request_id, set_request_context

logger = get_logger(__name__)

# Whitespace, commas and comments allowed before the first definition
_LEADING_IGNORED_RE = re.compile(r"(?:\s|,|#[^\n]*)*")
_OPERATION_RE = re.compile(r"(query|mutation|subscription)\b\s*(\w*)")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact GraphQL payload parameters so raw documents never reach the logs."""
    sanitized = dict(params)
    for key in ("query", "variables", "extensions"):
        if key in sanitized:
            sanitized[key] = "[REDACTED]"
    return sanitized


def operation_name_from_payload(payload: dict[str, Any]) -> str | None:
    """Derive a loggable operation name from a GraphQL request payload."""
    op = payload.get("operationName")
    if isinstance(op, str) and op:
        return op

    q = payload.get("query", "")
    if not isinstance(q, str) or not q:
        return None
    if "__schema" in q or "IntrospectionQuery" in q:
        return "__introspection"

    document = q[_LEADING_IGNORED_RE.match(q).end() :]
    match = _OPERATION_RE.match(document)
    if match is None:
        return "unnamed_operation"
    kind = "mutation:" if match.group(1) == "mutation" else ""
    return f"{kind}{match.group(2) or 'unnamed_operation'}"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        return operation_name_from_payload(dict(request.query_params))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        return operation_name_from_payload(data)

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        graphql_operation = await extract_graphql_operation_name(request)
        set_request_context(operation=graphql_operation)

        try:
            log_data: dict[str, Any] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": (
                    sanitize_query_params(dict(request.query_params))
                    if request.query_params
                    else None
                ),
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": request.client.host if request.client else None,
            }
            logger.info("Request started", **log_data)

            response = await call_next(request)
            response.headers["X-Request-ID"] = get_request_id() or ""

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
