"""HTTP middleware: global rate limit and the unhandled-error catch-all.

Both run inside CORSMiddleware, so throttled and failed responses still
carry the CORS headers the portfolio frontend needs to read them.
"""

import time
from typing import Awaitable, Callable

from fastapi import Request, Response

from app.portfolio_contact.presentation.api.dependencies import client_address
from app.portfolio_contact.presentation.api.errors import (
    rate_limited_response,
    unhandled_error_response,
)

CallNext = Callable[[Request], Awaitable[Response]]


async def global_rate_limit(request: Request, call_next: CallNext) -> Response:
    """Count the request in the global window and reject it when exceeded.

    Admitted responses carry X-RateLimit-Limit / -Remaining / -Reset headers.
    """
    limiter = request.app.state.services.global_limiter
    decision = await limiter.hit(client_address(request))

    if not decision.allowed:
        return rate_limited_response(decision.message, decision.retry_after_seconds)

    response = await call_next(request)
    response.headers["X-RateLimit-Limit"] = str(decision.limit)
    response.headers["X-RateLimit-Remaining"] = str(decision.remaining)
    response.headers["X-RateLimit-Reset"] = str(
        int(time.time() + decision.reset_after_seconds)
    )
    return response


async def catch_unhandled_errors(request: Request, call_next: CallNext) -> Response:
    """Turn exceptions no handler claimed into the generic 500 body."""
    try:
        return await call_next(request)
    except Exception as e:
        return unhandled_error_response(e, request.app.state.settings)
