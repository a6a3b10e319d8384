"""Cross-origin policy: any http://localhost:<port> origin, nothing else."""

from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import Response

LOCALHOST_ORIGIN_REGEX = r"^http://localhost:\d+$"
ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Accept", "Origin"]


class LocalhostCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that answers every preflight with an empty 204.

    Disallowed origins still get a 204, just without an
    ``Access-Control-Allow-Origin`` grant, so browsers block the request.
    """

    def __init__(self, app):
        super().__init__(
            app,
            allow_origin_regex=LOCALHOST_ORIGIN_REGEX,
            allow_methods=ALLOWED_METHODS,
            allow_headers=ALLOWED_HEADERS,
        )

    def preflight_response(self, request_headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            key: value
            for key, value in response.headers.items()
            if key.lower() not in ("content-length", "content-type")
        }
        return Response(status_code=204, headers=headers)


async def options_passthrough(request: Request, call_next):
    """Reply 204 to OPTIONS requests that are not CORS preflights."""
    if request.method == "OPTIONS":
        return Response(status_code=204)
    return await call_next(request)
