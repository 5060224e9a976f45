"""
Response middleware for request correlation and standardized JSON envelopes.
"""

import json
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from content_detector.core.logging import (
    clear_request_id,
    generate_request_id,
    get_logger,
    set_request_id,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_SKIPPED_PATHS = ("/openapi.json", "/docs", "/redoc")


class StandardResponseMiddleware(BaseHTTPMiddleware):
    """
    Wraps successful JSON responses as ``{"success": true, "data": ...}``.

    Bodies that already carry a ``success`` key (action replies, error
    payloads) pass through unchanged.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
        set_request_id(request_id)
        try:
            response = await call_next(request)
            response = await self._wrap(request, response)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_id()

    async def _wrap(self, request: Request, response):
        if request.url.path in _SKIPPED_PATHS:
            return response

        if not (200 <= response.status_code < 300):
            return response

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return response

        body = b""
        async for chunk in response.body_iterator:
            body += chunk

        try:
            data = json.loads(body.decode()) if body else None
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("response_middleware_error", error=str(e), path=request.url.path)
            return self._rebuild(response, body)

        if isinstance(data, dict) and "success" in data:
            content = data
        else:
            content = self._wrap_response(data)

        new_response = JSONResponse(content=content, status_code=response.status_code)

        # JSONResponse sets its own length and type; keep every other header
        for key, value in response.headers.items():
            if key.lower() in ("content-length", "content-type", "transfer-encoding"):
                continue
            new_response.headers.append(key, value)
        return new_response

    def _rebuild(self, response, body: bytes):
        # body_iterator is consumed; hand the raw bytes back unchanged
        headers = {
            k: v for k, v in response.headers.items()
            if k.lower() not in ("content-length", "transfer-encoding")
        }
        return Response(content=body, status_code=response.status_code, headers=headers)

    def _wrap_response(self, data: Any) -> dict:
        return {"success": True, "data": data}
