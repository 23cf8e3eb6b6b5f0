"""Lizard application class.

Mutable during setup (route registration, middleware, config).
Frozen at runtime when ``app.listen()`` or the first request arrives.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from lizard import __version__
from lizard._internal.asgi import Receive, Scope, Send
from lizard._internal.types import Handler
from lizard.config import AppConfig, ConfigStore
from lizard.errors import HandlerError
from lizard.event import RequestEvent
from lizard.http.body import decode_body
from lizard.http.query import parse_url
from lizard.http.request import Request
from lizard.http.response import Response, ResponseBuilder
from lizard.middleware.pipeline import Pipeline
from lizard.middleware.protocol import Middleware
from lizard.routing.route import Route, RouteMatch
from lizard.routing.router import Router
from lizard.server.handler import handle_request

logger = logging.getLogger("lizard.server")


class App:
    """The lizard application.

    Mutable during setup (routes, middleware, config). Frozen when it
    starts serving: ``listen()`` or the first ``fetch()`` / ASGI call.

    Usage::

        app = App()

        async def auth(event, next):
            if "authorization" not in event.headers:
                return event.response.status(401).text("Unauthorized")
            return await next()

        app.use(logger_middleware)
        app.config({"GREETING": "Hello"})

        @app.get("/users/:id", middleware=[auth])
        async def show_user(event):
            return event.response.json({"id": event.params["id"]})

        app.listen(3000)

    Thread safety:
        Setup is single-threaded. The freeze transition uses a Lock +
        double-check so exactly one caller compiles the app, even when
        several requests race on the first call. After freezing, the
        route table, middleware tuple and config store are read-only.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_router",
        "_server",
        "configs",
        "settings",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        # Server settings. App.config() feeds the separate ConfigStore.
        self.settings: AppConfig = config or AppConfig()
        self.configs: ConfigStore = ConfigStore()
        self._router: Router = Router()
        self._middleware_list: list[Middleware] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._middleware: tuple[Middleware, ...] = ()
        # Running uvicorn server, if listen() was called
        self._server: Any = None

    @property
    def version(self) -> str:
        """The lizard version serving this app."""
        return __version__

    @property
    def routes(self) -> list[Route]:
        """Registered routes in registration (= precedence) order."""
        return self._router.routes

    # -- Route registration --

    def route(
        self,
        method: str,
        path: str,
        handler: Handler | None = None,
        middleware: Iterable[Middleware] = (),
    ) -> Any:
        """Register *handler* for *method* and *path*.

        Every per-method helper funnels through here. Called without a
        handler it returns a decorator::

            app.route("GET", "/", index)

            @app.route("GET", "/users/:id")
            def show(event): ...

        Raises:
            InvalidPatternError: If *path* is not a valid route pattern.
            RuntimeError: If the app is already serving.
        """
        middleware = tuple(middleware)

        def register(func: Handler) -> Handler:
            self._check_not_frozen()
            self._router.add(method, path, func, middleware)
            return func

        if handler is None:
            return register
        register(handler)
        return None

    def get(self, path: str, handler: Handler | None = None, middleware: Iterable[Middleware] = ()) -> Any:
        """Register a GET route."""
        return self.route("GET", path, handler, middleware)

    def post(self, path: str, handler: Handler | None = None, middleware: Iterable[Middleware] = ()) -> Any:
        """Register a POST route."""
        return self.route("POST", path, handler, middleware)

    def put(self, path: str, handler: Handler | None = None, middleware: Iterable[Middleware] = ()) -> Any:
        """Register a PUT route."""
        return self.route("PUT", path, handler, middleware)

    def patch(self, path: str, handler: Handler | None = None, middleware: Iterable[Middleware] = ()) -> Any:
        """Register a PATCH route."""
        return self.route("PATCH", path, handler, middleware)

    def delete(self, path: str, handler: Handler | None = None, middleware: Iterable[Middleware] = ()) -> Any:
        """Register a DELETE route."""
        return self.route("DELETE", path, handler, middleware)

    del_ = delete

    # -- Middleware --

    def use(self, middleware: Middleware) -> Middleware:
        """Append a global middleware. Runs before any route middleware.

        Returns *middleware* unchanged, so it also works as a decorator.
        """
        self._check_not_frozen()
        self._middleware_list.append(middleware)
        return middleware

    # -- Application config store --

    def config(self, values: Mapping[str, Any]) -> None:
        """Merge *values* into the app-wide config store.

        Keys must be uppercase and each key can be set only once. The merge
        is all-or-nothing: if any key is rejected, none of this call's keys
        are applied.

        Raises:
            InvalidConfigKeyError: If any key is not uppercase.
            ConfigKeyExistsError: If any key is already set.
            RuntimeError: If the app is already serving.
        """
        self._check_not_frozen()
        self.configs.merge(values)

    # -- Request handling --

    async def fetch(self, request: Request) -> Response:
        """Handle one request and return its finalized response.

        Never raises for request-level failures: an unmatched route yields
        404 and any error from body decoding, middleware or handler yields
        500.
        """
        self._ensure_frozen()
        logger.info("Incoming request: %s %s", request.method, request.url)

        match = self._router.lookup(request.method, request.url)
        if match is None:
            logger.info("404 Not Found: %s %s", request.method, request.url)
            return ResponseBuilder().status(404).text("Not Found")

        pipeline = Pipeline((*self._middleware, *match.route.middleware), match.route.handler)
        try:
            event = await self._build_event(request, match)
            return await pipeline.run(event)
        except HandlerError:
            logger.exception("Error handling request: %s %s", request.method, request.url)
            return ResponseBuilder().status(500).text("Internal Server Error")

    async def _build_event(self, request: Request, match: RouteMatch) -> RequestEvent:
        try:
            body = await decode_body(request)
        except Exception as exc:
            raise HandlerError(request.method, request.url) from exc

        path, _ = parse_url(request.url)
        return RequestEvent(
            method=request.method,
            url=request.url,
            path=path,
            params=match.params,
            query=match.query,
            request=request,
            config=self.configs,
            locals={},
            response=ResponseBuilder(),
            body=body,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Answers the lifespan protocol directly, then delegates HTTP scopes
        to the request handler.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, app=self)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Freeze at startup so the first request does no compilation."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                self._ensure_frozen()
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Server --

    def listen(
        self,
        port: int | None = None,
        callback: Callable[[], Any] | None = None,
        *,
        host: str | None = None,
    ) -> None:
        """Serve the app with uvicorn (blocks until stopped).

        *callback* runs once the server is configured, just before it
        starts accepting connections.
        """
        from lizard.server.serve import create_server, run_server

        self._ensure_frozen()
        self._server = create_server(
            self,
            host or self.settings.host,
            port or self.settings.port,
            log_level=self.settings.log_level,
            access_log=self.settings.access_log,
        )
        if callback is not None:
            callback()
        try:
            run_server(self._server)
        finally:
            self._server = None

    def stop(self) -> None:
        """Ask a running server to exit. No-op if not listening."""
        if self._server is not None:
            self._server.should_exit = True

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        self._router.compile()
        self._middleware = tuple(self._middleware_list)
        self.configs.freeze()
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and config before calling app.listen()."
            )
            raise RuntimeError(msg)
