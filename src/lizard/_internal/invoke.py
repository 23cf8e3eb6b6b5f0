"""Invoke helpers — call sync or async callables uniformly.

Lizard handlers and middleware can be ``def`` or ``async def``. Any code
that calls user-provided code goes through this helper so the sync/async
check lives in exactly one place.

Usage::

    from lizard._internal.invoke import invoke

    result = await invoke(handler, event)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it is awaitable.

    A sync middleware may simply ``return next()``; the coroutine it hands
    back is awaited here::

        def passthrough(event, next):
            return next()

        async def timing(event, next):
            start = time.monotonic()
            response = await next()
            return response.with_header("X-Time", f"{time.monotonic() - start:.3f}")
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
