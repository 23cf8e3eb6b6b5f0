"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(event: RequestEvent, next: Next) -> Response

Global middleware (``app.use``) runs first, then the matched route's own
middleware, each list in registration order.
"""

from lizard.middleware.pipeline import Pipeline, PipelineState, coerce_response
from lizard.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "Next",
    "Pipeline",
    "PipelineState",
    "coerce_response",
]
