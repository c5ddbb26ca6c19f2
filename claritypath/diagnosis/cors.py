"""
Cross-origin headers for the diagnosis endpoint.

Allow-listed origins are echoed back with credentials; anything else gets the
first allow-listed origin and no credentials header.
"""
from starlette.responses import Response

ALLOW_METHODS = 'POST, OPTIONS'
ALLOW_HEADERS = 'Content-Type, Authorization, X-Requested-With'
MAX_AGE = '86400'


def set_cors_headers(response: Response, origin: str | None, allowed_origins) -> Response:
    if origin and origin in allowed_origins:
        response.headers['Access-Control-Allow-Origin'] = origin
        response.headers['Access-Control-Allow-Credentials'] = 'true'
    else:
        response.headers['Access-Control-Allow-Origin'] = allowed_origins[0] if allowed_origins else '*'

    response.headers['Access-Control-Allow-Methods'] = ALLOW_METHODS
    response.headers['Access-Control-Allow-Headers'] = ALLOW_HEADERS
    response.headers['Access-Control-Max-Age'] = MAX_AGE
    return response
