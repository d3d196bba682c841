"""
Rate limiting for the public analytics API.

Uses slowapi to enforce a per-client request budget on the public views.
"""

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from starlette.responses import JSONResponse

from schemas.common import ApiStatus


# Analytical views are keyed by client address only
limiter = Limiter(key_func=get_remote_address)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Custom handler for rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={
            "status": ApiStatus.RATE_LIMITED.value,
            "message": f"Rate limit exceeded: {exc.detail}",
            "data": None,
        },
    )


PUBLIC_RATE_LIMIT = "100/minute"
AUTH_RATE_LIMIT = "20/minute"
