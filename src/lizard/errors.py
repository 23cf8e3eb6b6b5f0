"""Lizard exception hierarchy.

Shared across Router, ResponseBuilder, Pipeline and App so every module
raises and catches the same types.
"""


class LizardError(Exception):
    """Base for all lizard-specific errors."""


class ConfigurationError(LizardError):
    """Raised when app settings are invalid.

    Typically raised by ``AppConfig`` at construction time.
    """


class InvalidPatternError(LizardError, ValueError):
    """Raised when a route pattern cannot be compiled.

    Surfaces to the caller of the registration API; a malformed route is
    never silently dropped.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid route pattern {pattern!r}: {reason}")


class InvalidStatusError(LizardError, ValueError):
    """Raised when a status code outside 100-599 is set on a response."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__(f"Invalid status code: {code!r} (expected 100-599)")


class EmptyValueError(LizardError, ValueError):
    """Raised when a status text, header name or header value is empty."""


class InvalidHeaderError(LizardError, ValueError):
    """Raised when a header name or value cannot go out on the wire.

    HTTP header fields are latin-1 and single-line.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid header {name!r}: {reason}")


class InvalidConfigKeyError(LizardError, KeyError):
    """Raised when ``App.config()`` receives a key that is not uppercase."""

    def __init__(self, keys: list[str]) -> None:
        self.keys = keys
        joined = ", ".join(repr(k) for k in keys)
        super().__init__(f"Config keys must be uppercase: {joined}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ConfigKeyExistsError(LizardError, KeyError):
    """Raised when ``App.config()`` tries to set a key that is already set.

    Config keys are write-once: a later merge may add keys but never
    replace one.
    """

    def __init__(self, keys: list[str]) -> None:
        self.keys = keys
        joined = ", ".join(repr(k) for k in keys)
        super().__init__(f"Config keys are already set: {joined}")

    def __str__(self) -> str:
        return str(self.args[0])


class HandlerError(LizardError):
    """A middleware or handler raised while dispatching a request.

    Raised by the pipeline with the original exception chained as
    ``__cause__``. ``App.fetch`` catches it, logs it and answers 500;
    the original error is never exposed to the client.
    """

    def __init__(self, method: str, url: str) -> None:
        self.method = method
        self.url = url
        super().__init__(f"Error handling {method} {url}")
