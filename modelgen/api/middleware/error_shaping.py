from __future__ import annotations

import logging
import traceback
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from modelgen.errors import ModelGenError

log = logging.getLogger("modelgen.errors")


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    - Never return stack traces to clients
    - Map ModelGenError to its status code with the error message
    - Preserve request_id if present
    - Log traceback server-side
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = None
        try:
            return await call_next(request)
        except ModelGenError as e:
            rid = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
            log.warning("Request failed: %s rid=%s path=%s", str(e), rid, request.url.path)
            payload = {"detail": str(e)}
            status = e.status_code
        except Exception as e:
            rid = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
            log.error(
                "Unhandled error: %s rid=%s path=%s\n%s",
                str(e),
                rid,
                request.url.path,
                traceback.format_exc(),
            )
            payload = {"detail": "Internal Server Error"}
            status = 500
        if rid:
            payload["request_id"] = rid
        return JSONResponse(status_code=status, content=payload)
