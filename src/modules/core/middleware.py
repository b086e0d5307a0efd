import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Tag every request, and each log line it produces, with a request id.

    The id comes from the ``X-Request-ID`` header or is a fresh UUID4. It is
    bound as ``correlation_id`` in structlog's contextvars and echoed on the
    response. Only ``request.path`` is logged because query strings on the
    collection endpoints may carry e-mail filters.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid, method=request.method, path=request.path
        )

        started = time.monotonic()
        logger.info("request_started")
        response = self.get_response(request)
        logger.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = cid
        return response
