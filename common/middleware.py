"""
common.middleware
~~~~~~~~~~~~~~~~~
Request-level middleware.

StructuredLoggingMiddleware
    One structlog record per HTTP request, with a ``request_id`` bound into
    the structlog context for every log line emitted while serving it.

HttpMethodOverrideMiddleware
    Lets HTML forms, which can only POST, reach PATCH / PUT / DELETE handlers
    through a hidden ``_method`` field.
"""
import time
import uuid

import structlog

logger = structlog.get_logger(__name__)


class StructuredLoggingMiddleware:
    """
    Emit one structured log record per HTTP request.

    Log record fields:
        event       – "http_request"
        request_id  – value of the ``X-Request-ID`` header, or a fresh UUID4
        method      – HTTP verb after any ``_method`` override
        path        – URL path
        status      – HTTP response status code (int)
        duration_ms – Round-trip duration in milliseconds (float, 2 dp)
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.monotonic()
        try:
            response = self.get_response(request)
            duration_ms = round((time.monotonic() - start) * 1000, 2)
            logger.info(
                "http_request",
                method=request.method,
                path=request.get_full_path(),
                status=response.status_code,
                duration_ms=duration_ms,
            )
            response["X-Request-ID"] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()


class HttpMethodOverrideMiddleware:
    """
    Rewrite ``POST`` + ``_method=PATCH|PUT|DELETE`` to that method.

    The rewrite happens in :meth:`process_view` and the middleware must be
    listed after ``CsrfViewMiddleware``, so the CSRF check still sees a POST
    and reads its token from the form body.  ``request.POST`` is parsed while
    the method is still POST and stays available to the view.
    """

    OVERRIDABLE = frozenset({"PATCH", "PUT", "DELETE"})
    FIELD = "_method"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_view(self, request, view_func, view_args, view_kwargs):
        if request.method != "POST":
            return None
        override = request.POST.get(self.FIELD, "").strip().upper()
        if override in self.OVERRIDABLE:
            logger.debug("http_method_overridden", method=override, path=request.path)
            request.method = override
        return None
