"""Lizard: a minimal HTTP routing layer.

Routes with named parameters, onion-style middleware, a per-request event
and a chainable response builder, served over ASGI.

Basic usage::

    from lizard import App

    app = App()

    @app.get("/hello/:name")
    def hello(event):
        return event.response.text(f"Hello, {event.params['name']}!")

    app.listen(3000)
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigKeyExistsError",
    "ConfigurationError",
    "EmptyValueError",
    "HandlerError",
    "InvalidConfigKeyError",
    "InvalidHeaderError",
    "InvalidPatternError",
    "InvalidStatusError",
    "LizardError",
    "Middleware",
    "Next",
    "Request",
    "RequestEvent",
    "Response",
    "ResponseBuilder",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import lizard`` fast while providing a clean top-level API.
    """
    if name == "App":
        from lizard.app import App

        return App

    if name == "AppConfig":
        from lizard.config import AppConfig

        return AppConfig

    if name == "Request":
        from lizard.http.request import Request

        return Request

    if name == "RequestEvent":
        from lizard.event import RequestEvent

        return RequestEvent

    if name in ("Response", "ResponseBuilder"):
        from lizard.http import response as _resp

        return getattr(_resp, name)

    if name in ("Middleware", "Next"):
        from lizard.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in (
        "ConfigKeyExistsError",
        "ConfigurationError",
        "EmptyValueError",
        "HandlerError",
        "InvalidConfigKeyError",
        "InvalidHeaderError",
        "InvalidPatternError",
        "InvalidStatusError",
        "LizardError",
    ):
        from lizard import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
