"""Per-request log line for the reference ledger API.

Every ledger call is a POST, so the line is mostly endpoint and latency.
Envelope errors (unknown transaction, missing employee id) come back as
4xx and are logged at WARNING. The request id is also echoed back in the
X-Request-ID header so a client-side TransportError can be matched to its
server line:

    WARNING [POST] /api/v1/setTransactionApproval → 404 (1ms) req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("lr.request")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        # Handlers copy this into ApiResponse.request_id
        request.state.request_id = f"req_{uuid.uuid4().hex[:12]}"

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request.state.request_id,
        )
        response.headers["X-Request-ID"] = request.state.request_id
        return response
