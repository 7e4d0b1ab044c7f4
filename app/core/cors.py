"""
Permissive cross-origin headers applied to every response.
"""
from starlette.requests import Request
from starlette.responses import Response

from app.utils.constant import CORS_ALLOWED_HEADERS, CORS_ALLOWED_METHODS

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": CORS_ALLOWED_METHODS,
    "Access-Control-Allow-Headers": CORS_ALLOWED_HEADERS,
}


def set_cors_headers(response: Response) -> Response:
    for header, value in CORS_HEADERS.items():
        response.headers[header] = value
    return response


async def cors_middleware(request: Request, call_next):
    """
    Answer pre-flight requests directly and stamp CORS headers on everything else.
    """
    if request.method == "OPTIONS":
        return set_cors_headers(Response(status_code=200))
    response = await call_next(request)
    return set_cors_headers(response)
