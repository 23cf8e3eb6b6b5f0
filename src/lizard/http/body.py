"""Request body decoding by Content-Type.

Runs once per matched request, before the middleware chain, so every
middleware and the handler see the same ``event.body``.
"""

from typing import Any

from lizard.http.request import Request

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def decode_body(request: Request) -> Any:
    """Decode *request*'s body according to its Content-Type.

    - ``application/json`` -> the decoded JSON value
    - URL-encoded and multipart forms -> ``dict[str, str | UploadFile]``
    - anything else, or no Content-Type -> ``None`` (body left unread)

    An empty JSON body decodes to ``None``. Malformed bodies raise
    (``ValueError`` subclasses), which the app turns into a 500.
    """
    content_type = (request.content_type or "").lower()
    if "application/json" in content_type:
        raw = await request.body()
        if not raw.strip():
            return None
        return await request.json()
    if any(form_type in content_type for form_type in FORM_TYPES):
        form = await request.form()
        return form.to_dict()
    return None
