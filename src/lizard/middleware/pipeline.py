"""Dispatch pipeline — onion-style middleware around a terminal handler.

For a chain ``[A, B]`` around handler ``H`` the call order is::

    A(before) -> B(before) -> H -> B(after) -> A(after)

A middleware that returns without awaiting ``next()`` short-circuits:
its response ends the whole chain. Neither the handler nor the "after"
half of any earlier middleware runs.

Each request gets its own ``Pipeline``; the middleware tuple it is built
from is shared and read-only.
"""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from lizard._internal.invoke import invoke
from lizard.errors import HandlerError
from lizard.event import RequestEvent
from lizard.http.response import Response


class PipelineState(Enum):
    """Lifecycle of one pipeline run."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


def coerce_response(value: Any, event: RequestEvent) -> Response:
    """Turn a handler or middleware return value into a ``Response``.

    Dispatch order:

    1. ``Response``         -> pass through
    2. ``str``              -> ``event.response.text(value)``
    3. ``bytes``            -> ``event.response.send(value)``
    4. ``dict`` / ``list``  -> ``event.response.json(value)``

    Anything else is a programming error.
    """
    match value:
        case Response():
            return value
        case str():
            return event.response.text(value)
        case bytes():
            return event.response.send(value)
        case dict() | list():
            return event.response.json(value)
    msg = (
        f"Handler returned {type(value).__name__}; expected a Response "
        "(or str, bytes, dict, list)."
    )
    raise TypeError(msg)


class _ShortCircuit(BaseException):
    """Carries a short-circuit response out through the enclosing ``next()`` calls.

    A BaseException so that ``except Exception`` in user middleware does not
    catch it.
    """

    def __init__(self, response: Response) -> None:
        super().__init__()
        self.response = response


class Pipeline:
    """Runs a middleware chain and handler for a single request.

    Usage::

        pipeline = Pipeline((*global_middleware, *route.middleware), route.handler)
        response = await pipeline.run(event)

    ``run`` re-raises any failure as ``HandlerError`` with the original
    exception as ``__cause__``. After ``run`` returns or raises, ``state``
    is ``COMPLETED`` or ``FAILED``.
    """

    __slots__ = ("handler", "index", "middleware", "state")

    def __init__(
        self,
        middleware: Sequence[Callable[..., Any]],
        handler: Callable[..., Any],
    ) -> None:
        self.middleware = tuple(middleware)
        self.handler = handler
        self.state = PipelineState.PENDING
        # Index of the middleware currently running (len(middleware) = handler)
        self.index = -1

    def __repr__(self) -> str:
        return f"<Pipeline {self.state.value} {self.index}/{len(self.middleware)}>"

    async def run(self, event: RequestEvent) -> Response:
        """Dispatch *event* through the chain and return its response."""
        if self.state is not PipelineState.PENDING:
            msg = f"Pipeline already {self.state.value}; build a new one per request."
            raise RuntimeError(msg)

        self.state = PipelineState.RUNNING
        try:
            response = await self._dispatch(0, event)
        except _ShortCircuit as stop:
            response = stop.response
        except Exception as exc:
            self.state = PipelineState.FAILED
            raise HandlerError(event.method, event.url) from exc
        self.state = PipelineState.COMPLETED
        return response

    async def _dispatch(self, index: int, event: RequestEvent) -> Response:
        self.index = index

        if index == len(self.middleware):
            return coerce_response(await invoke(self.handler, event), event)

        called = False

        async def next_() -> Response:
            nonlocal called
            if called:
                msg = f"next() called more than once by middleware #{index}"
                raise RuntimeError(msg)
            called = True
            return await self._dispatch(index + 1, event)

        response = coerce_response(await invoke(self.middleware[index], event, next_), event)
        if not called:
            raise _ShortCircuit(response)
        return response
