"""URL and query string parsing.

The router receives whatever URL the transport hands over: an absolute
URL, an origin-relative path, or a host followed by a path with no
scheme. ``parse_url`` reduces all three to ``(path, query_string)``.
"""

from urllib.parse import unquote, urlsplit


def parse_url(url: str) -> tuple[str, str]:
    """Split a request URL into its path and raw query string.

    Examples::

        parse_url("/users/1?page=2")                 -> ("/users/1", "page=2")
        parse_url("http://example.com/path?a=b")     -> ("/path", "a=b")
        parse_url("example.com/path")                -> ("/path", "")
        parse_url("http://example.com")              -> ("/", "")

    The path is returned as sent (still percent-encoded).
    """
    if not url.startswith("/") and "://" not in url:
        url = f"http://{url}"
    if url.startswith("/"):
        path, _, query_string = url.partition("?")
        path = path.partition("#")[0]
    else:
        parts = urlsplit(url)
        path, query_string = parts.path, parts.query
    return path or "/", query_string.partition("#")[0]


def parse_query(query_string: str) -> dict[str, str]:
    """Parse a query string into a flat mapping.

    Pairs are split on ``&`` and then on the first ``=``; keys and values
    are percent-decoded. A pair without ``=`` yields an empty value, and
    a repeated key keeps its last value::

        parse_query("name=hello%20world&key=123") -> {"name": "hello world", "key": "123"}
        parse_query("flag")                       -> {"flag": ""}
        parse_query("")                           -> {}
    """
    if query_string.startswith("?"):
        query_string = query_string[1:]
    result: dict[str, str] = {}
    for pair in query_string.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        result[unquote(key)] = unquote(value)
    return result
