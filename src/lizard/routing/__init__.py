"""Routing — compiled route patterns in a registration-ordered table.

Routes are registered during setup and frozen when the app starts
serving requests.
"""

from lizard.routing.pattern import CompiledPattern, PathSegment, compile_pattern
from lizard.routing.route import Route, RouteMatch
from lizard.routing.router import Router

__all__ = [
    "CompiledPattern",
    "PathSegment",
    "Route",
    "RouteMatch",
    "Router",
    "compile_pattern",
]
