"""Route table with registration-order, first-match lookup.

Routes are registered during setup and frozen when the app starts
serving. Lookup is a linear scan: the first route (in registration
order) whose method and pattern match wins. An earlier, looser pattern
shadows a later, more specific one::

    router.add("GET", "/home/:id", show)
    router.add("GET", "/home/profile", profile)   # never reached
    router.lookup("GET", "/home/profile").params  # {"id": "profile"}
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from lizard.http.query import parse_query, parse_url
from lizard.routing.pattern import compile_pattern
from lizard.routing.route import Route, RouteMatch

logger = logging.getLogger("lizard.routing")


class Router:
    """Ordered route table.

    Usage::

        router = Router()
        router.add("GET", "/users/:id", get_user)
        router.compile()
        match = router.lookup("GET", "/users/42?fields=name")
        match.params  # {"id": "42"}
        match.query   # {"fields": "name"}
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._compiled = False

    def add(
        self,
        method: str,
        pattern: str,
        handler: Callable[..., Any],
        middleware: Iterable[Callable[..., Any]] = (),
    ) -> Route:
        """Compile *pattern* and append a route. Must be called before compile().

        Duplicate patterns are accepted; the earlier registration wins at
        lookup time.

        Raises:
            InvalidPatternError: If the pattern cannot be compiled.
            RuntimeError: If the router has been compiled.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        route = Route(
            method=method.upper(),
            pattern=compile_pattern(pattern),
            handler=handler,
            middleware=tuple(middleware),
        )
        self._routes.append(route)
        logger.debug("Registered %s %s", route.method, pattern)
        return route

    @property
    def routes(self) -> list[Route]:
        """All registered routes in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def lookup(self, method: str, url: str) -> RouteMatch | None:
        """Find the first route matching *method* and *url*.

        The URL may be absolute or origin-relative and may carry a query
        string, which is parsed only when a route matches. Returns ``None``
        when nothing matches.
        """
        method = method.upper()
        path, query_string = parse_url(url)

        for route in self._routes:
            if route.method != method:
                continue
            params = route.pattern.match(path)
            if params is not None:
                return RouteMatch(route=route, params=params, query=parse_query(query_string))
        return None
