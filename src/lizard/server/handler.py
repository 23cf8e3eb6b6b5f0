"""ASGI handler — translates ASGI scope/messages to lizard types.

The only component that touches raw ASGI directly. Converts the scope to
a typed ``Request``, hands it to ``App.fetch()``, and sends the finalized
``Response`` back through ASGI ``send()``.
"""

from typing import TYPE_CHECKING

from lizard._internal.asgi import Receive, Scope, Send
from lizard.http.request import Request
from lizard.server.sender import send_response

if TYPE_CHECKING:
    from lizard.app import App


async def handle_request(scope: Scope, receive: Receive, send: Send, *, app: "App") -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    response = await app.fetch(request)
    await send_response(response, send)
