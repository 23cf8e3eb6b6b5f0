"""HTTP responses: a mutable builder and the immutable value it produces.

Every RequestEvent owns a fresh ``ResponseBuilder``. Handlers and
middleware set status, status text and headers on it, then finalize it
with ``text()``, ``html()``, ``json()`` or ``send()``::

    async def create_user(event):
        return event.response.status(201).header("Location", "/users/7").json({"id": 7})

Finalizing copies the accumulated state into a frozen ``Response``; the
builder itself is left untouched, so calling a second finalizer yields
another independent response.
"""

import json as json_module
from dataclasses import dataclass, replace
from http import HTTPStatus
from typing import Any

from lizard.errors import EmptyValueError, InvalidHeaderError, InvalidStatusError
from lizard.http.headers import MutableHeaders


def _check_status(code: object) -> int:
    if isinstance(code, bool) or not isinstance(code, int) or not 100 <= code <= 599:
        raise InvalidStatusError(code)
    return code


def _check_header(name: str, value: str) -> None:
    if not name or not value:
        msg = "Header key and value cannot be empty"
        raise EmptyValueError(msg)
    for part in (name, value):
        if "\r" in part or "\n" in part:
            raise InvalidHeaderError(name, "contains a line break")
        try:
            part.encode("latin-1")
        except UnicodeEncodeError:
            raise InvalidHeaderError(name, "is not latin-1 encodable") from None


def reason_phrase(code: int) -> str:
    """Standard reason phrase for *code* (``"Unknown"`` for unassigned codes)."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return "Unknown"


@dataclass(frozen=True, slots=True)
class Response:
    """A finalized HTTP response.

    Immutable. Middleware that post-processes a response returns a new
    one through the chainable ``.with_*()`` API::

        async def powered_by(event, next):
            response = await next()
            return response.with_header("X-Powered-By", "lizard")
    """

    body: bytes = b""
    status: int = 200
    status_text: str = "OK"
    headers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        for name, value in self.headers:
            _check_header(name, value)

    # -- Chainable transformations --

    def with_status(self, status: int, status_text: str | None = None) -> "Response":
        """Return a new Response with a different status code.

        The status text follows the code unless *status_text* is given.
        """
        code = _check_status(status)
        if status_text is not None and not status_text:
            msg = "Status text cannot be empty"
            raise EmptyValueError(msg)
        return replace(self, status=code, status_text=status_text or reason_phrase(code))

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with *name* set to *value*.

        Any existing header with the same name (case-insensitive) is replaced.

        Raises:
            EmptyValueError: If *name* or *value* is empty.
            InvalidHeaderError: If either is not a single latin-1 line.
        """
        _check_header(name, value)
        lowered = name.lower()
        kept = tuple((n, v) for n, v in self.headers if n.lower() != lowered)
        return replace(self, headers=(*kept, (name, value)))

    # -- Accessors --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for n, v in self.headers:
            if n.lower() == lowered:
                return v
        return default

    @property
    def content_type(self) -> str | None:
        """The Content-Type header, if any."""
        return self.header("content-type")

    @property
    def text(self) -> str:
        """Body as string."""
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(self.body)


class ResponseBuilder:
    """Mutable accumulator for status, status text and headers.

    Defaults to ``200 OK`` with no headers. Until a status text is set
    explicitly it tracks the standard reason phrase of the current code.
    All setters return the builder so calls chain.
    """

    __slots__ = ("_status_text", "headers", "status_code")

    def __init__(self) -> None:
        self.status_code: int = 200
        self._status_text: str | None = None
        self.headers: MutableHeaders = MutableHeaders()

    def __repr__(self) -> str:
        return f"ResponseBuilder({self.status_code} {self.status_text!r}, {self.headers!r})"

    @property
    def status_text(self) -> str:
        """The status text sent with the response."""
        return self._status_text or reason_phrase(self.status_code)

    # -- Setters --

    def status(self, code: int) -> "ResponseBuilder":
        """Set the status code.

        Raises:
            InvalidStatusError: If *code* is outside 100-599.
        """
        self.status_code = _check_status(code)
        return self

    def set_status_text(self, text: str) -> "ResponseBuilder":
        """Set the status text.

        Raises:
            EmptyValueError: If *text* is empty.
        """
        if not text:
            msg = "Status text cannot be empty"
            raise EmptyValueError(msg)
        self._status_text = text
        return self

    def header(self, key: str, value: str) -> "ResponseBuilder":
        """Set a header, replacing any previous value for *key*.

        Raises:
            EmptyValueError: If *key* or *value* is empty.
            InvalidHeaderError: If either is not a single latin-1 line.
        """
        _check_header(key, value)
        self.headers[key] = value
        return self

    # -- Finalizers --

    def _finalize(self, body: bytes, content_type: str | None) -> Response:
        headers = MutableHeaders(self.headers)
        if content_type is not None:
            headers["Content-Type"] = content_type
        return Response(
            body=body,
            status=self.status_code,
            status_text=self.status_text,
            headers=headers.to_tuple(),
        )

    def send(self, body: str | bytes = b"") -> Response:
        """Finalize with a raw body. No Content-Type is stamped."""
        data = body.encode("utf-8") if isinstance(body, str) else body
        return self._finalize(data, None)

    def text(self, body: str) -> Response:
        """Finalize as ``text/plain``."""
        return self._finalize(body.encode("utf-8"), "text/plain")

    def html(self, body: str) -> Response:
        """Finalize as ``text/html``."""
        return self._finalize(body.encode("utf-8"), "text/html")

    def json(self, value: Any) -> Response:
        """Finalize as ``application/json`` with a compact encoding."""
        data = json_module.dumps(value, separators=(",", ":"), ensure_ascii=False)
        return self._finalize(data.encode("utf-8"), "application/json")
