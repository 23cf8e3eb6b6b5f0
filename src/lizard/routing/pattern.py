"""Route pattern compilation and matching.

A pattern is a path template of literal segments and ``:name``
placeholders::

    "/users"              -> [PathSegment("users")]
    "/users/:id"          -> [PathSegment("users"), PathSegment(":id", is_param=True, ...)]
    "/posts/:post/c/:cid" -> four segments, two parameters

Each placeholder matches exactly one non-empty path segment. Patterns
and paths must have the same number of segments to match, so
``/test/`` never matches ``/test`` and ``/test/:id`` never matches
``/test``.
"""

from dataclasses import dataclass
from urllib.parse import unquote

from lizard.errors import InvalidPatternError


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal: ``users`` (is_param=False)
    Param:   ``:id``   (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


def split_path(path: str) -> list[str]:
    """Split a path on ``/``, dropping the empty segment of a leading slash.

    Trailing and doubled slashes are kept as empty segments::

        split_path("/users/42")  -> ["users", "42"]
        split_path("/users/")    -> ["users", ""]
        split_path("/")          -> [""]
    """
    parts = path.split("/")
    if len(parts) > 1 and parts[0] == "":
        parts = parts[1:]
    return parts


def parse_pattern(pattern: str) -> list[PathSegment]:
    """Parse a pattern string into segments.

    Raises ``InvalidPatternError`` for an empty pattern, a bare ``:`` or a
    parameter name used twice.
    """
    if not pattern:
        raise InvalidPatternError(pattern, "pattern is empty")

    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in split_path(pattern):
        if not part.startswith(":"):
            segments.append(PathSegment(value=part))
            continue

        name = part[1:]
        if not name:
            raise InvalidPatternError(pattern, "parameter name is empty")
        if name in seen:
            raise InvalidPatternError(pattern, f"parameter {name!r} is declared twice")
        seen.add(name)
        segments.append(PathSegment(value=part, is_param=True, param_name=name))
    return segments


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A compiled route pattern. Immutable; built once at registration."""

    pattern: str
    segments: tuple[PathSegment, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        """Parameter names in declaration order."""
        return tuple(seg.param_name for seg in self.segments if seg.param_name)

    def match(self, path: str) -> dict[str, str] | None:
        """Match a concrete path, returning the captured parameters.

        Returns ``None`` on the first mismatching segment or when the
        segment counts differ. Captured values are percent-decoded;
        literal segments compare against the raw path.
        """
        parts = split_path(path)
        if len(parts) != len(self.segments):
            return None

        params: dict[str, str] = {}
        for seg, part in zip(self.segments, parts, strict=True):
            if seg.is_param:
                if not part:
                    return None
                params[seg.param_name or ""] = unquote(part)
            elif seg.value != part:
                return None
        return params


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a pattern string into a ``CompiledPattern``."""
    return CompiledPattern(pattern=pattern, segments=tuple(parse_pattern(pattern)))
