"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lizard.routing.pattern import CompiledPattern


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created at registration, owned by the router, never mutated.
    """

    method: str
    pattern: CompiledPattern
    handler: Callable[..., Any]
    middleware: tuple[Callable[..., Any], ...] = ()

    @property
    def path(self) -> str:
        """The pattern string this route was registered with."""
        return self.pattern.pattern


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route lookup."""

    route: Route
    params: dict[str, str]
    query: dict[str, str]
