"""
Pull-based telemetry in the Prometheus text exposition format.

prometheus_client registers process, platform and GC collectors on its default
registry at import time; this module adds per-request counters for the HTTP
surface and the ``/metrics`` route that exposes them.
"""

import time

from fastapi import APIRouter, FastAPI, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Histogram,
    generate_latest,
)

UNMATCHED_ROUTE = "unmatched"

HTTP_REQUESTS = Counter(
    "taskboard_http_requests_total",
    "HTTP requests handled, by method, route template and status code",
    ["method", "route", "status"],
)

HTTP_REQUEST_DURATION = Histogram(
    "taskboard_http_request_duration_seconds",
    "HTTP request latency in seconds, by method and route template",
    ["method", "route"],
)

router = APIRouter(tags=["Telemetry"])


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)


def _route_label(request: Request) -> str:
    # Label by template (e.g. /tasks/{username}) so raw paths cannot explode cardinality.
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)


def install_metrics(app: FastAPI) -> None:
    """Mount /metrics and record every request handled by ``app``."""

    @app.middleware("http")
    async def record_request_metrics(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            route = _route_label(request)
            HTTP_REQUESTS.labels(request.method, route, str(status_code)).inc()
            HTTP_REQUEST_DURATION.labels(request.method, route).observe(
                time.perf_counter() - start
            )

    app.include_router(router)
