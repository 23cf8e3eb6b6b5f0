"""Shared type aliases used across lizard modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives the RequestEvent, returns a Response (or a value
# the pipeline can coerce into one). Sync or async.
Handler: TypeAlias = Callable[..., Any]
