"""Flask blueprint exposing the telemetry ingestion endpoint."""
from __future__ import annotations

import logging

from flask import Blueprint, Response, request

from ..ingest.handler import IngestRequest, IngestResponse, TEXT_CONTENT_TYPE
from ..storage.base import StoreError
from .dependencies import get_handler

logger = logging.getLogger(__name__)

ingest_bp = Blueprint("ingest", __name__)

# Every path is routed to the handler so that it, not the URL map, decides
# between 404 and 405.
HANDLED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _to_flask(result: IngestResponse) -> Response:
    response = Response(result.body, status=result.status, headers=result.headers)
    if not result.body and "Content-Type" not in result.headers:
        del response.headers["Content-Type"]
    return response


def _raw_path() -> str:
    # request.path collapses leading slashes; "//submit" must stay distinct.
    path_info = request.environ.get("PATH_INFO", "")
    return path_info.encode("latin-1").decode("utf-8", "replace") or "/"


def _dispatch() -> Response:
    result = get_handler().handle(
        IngestRequest(
            method=request.method,
            path=_raw_path(),
            body=request.get_data(cache=False),
        )
    )
    return _to_flask(result)


@ingest_bp.route("/", defaults={"path": ""}, methods=HANDLED_METHODS)
@ingest_bp.route("/<path:path>", methods=HANDLED_METHODS)
def ingest(path: str):
    return _dispatch()


@ingest_bp.before_app_request
def dispatch_unrouted():
    # Requests the URL map rejects or would redirect (unlisted methods, an
    # empty path) go through the same gate as routed ones.
    if request.routing_exception is not None:
        return _dispatch()
    return None


@ingest_bp.app_errorhandler(StoreError)
def store_failure(exc: StoreError):
    logger.error(
        "Failed to persist telemetry submission: %s",
        exc,
        exc_info=exc,
        extra={"method": request.method, "path": request.path},
    )
    return Response("Internal server error", status=500, content_type=TEXT_CONTENT_TYPE)


@ingest_bp.app_errorhandler(500)
def internal_error(_exc):
    return Response("Internal server error", status=500, content_type=TEXT_CONTENT_TYPE)
