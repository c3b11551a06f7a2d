from __future__ import annotations

from urllib.parse import quote

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

from ..domain.resolution import Resolution
from ..service.resolver import FileResolver

router = APIRouter()

# Every request is resolved the same way regardless of method.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def request_target(request: Request) -> bytes:
    """Return the request path exactly as the client sent it (still percent-encoded)."""
    raw = request.scope.get("raw_path")
    if raw:
        # Some servers/transports include the query string in raw_path.
        return bytes(raw).split(b"?", 1)[0]
    return quote(request.scope["path"], safe="/").encode("ascii")


def to_response(resolution: Resolution) -> Response:
    """Turn a resolution into an HTTP response.

    File bytes are sent without a content-type header; the not-found body is
    plain text.
    """
    if resolution.found:
        return Response(content=resolution.body, status_code=resolution.status)
    return PlainTextResponse(content=resolution.body, status_code=resolution.status)


@router.api_route(
    "/{path:path}",
    methods=ALL_METHODS,
    include_in_schema=False,
)
def serve_file(path: str, request: Request) -> Response:
    """Serve the file mapped from the request path, or 404.

    Declared sync so FastAPI runs the blocking read in its thread pool.
    """
    resolver: FileResolver = request.app.state.resolver
    return to_response(resolver.resolve_path(request_target(request)))
