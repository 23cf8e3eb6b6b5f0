"""Application configuration.

Two separate things live here:

- ``AppConfig`` — server settings. A frozen dataclass, immutable after
  creation, IDE-autocompletable.
- ``ConfigStore`` — the application-scoped key/value store that
  ``App.config()`` merges user settings into and that every
  ``RequestEvent`` exposes as ``event.config``.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from lizard.errors import ConfigKeyExistsError, ConfigurationError, InvalidConfigKeyError

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Server settings. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, log_level="debug")
    """

    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "info"
    access_log: bool = True

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            msg = f"port must be between 1 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.log_level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}; got {self.log_level!r}"
            raise ConfigurationError(msg)


def _is_uppercase_key(key: object) -> bool:
    return isinstance(key, str) and bool(key) and key == key.upper() and key != key.lower()


class ConfigStore(Mapping[str, Any]):
    """Application-scoped settings, read-only to request code.

    Keys must be uppercase (``DATABASE_URL``, ``MAX_ITEMS``) and are
    write-once. The only way in is ``merge()``, which validates every key
    before applying any::

        store = ConfigStore()
        store.merge({"API_KEY": "k"})
        store.merge({"REGION": "eu", "debug": True})  # raises, REGION not set
        store.merge({"API_KEY": "k2"})                # raises, API_KEY stays "k"
    """

    __slots__ = ("_data", "_frozen")

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._frozen = False

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfigStore({self._data!r})"

    def merge(self, values: Mapping[str, Any]) -> None:
        """Merge *values* into the store, all-or-nothing.

        Every key is checked before any is applied, so a rejected call
        leaves the store unchanged.

        Raises:
            InvalidConfigKeyError: If any key is not uppercase.
            ConfigKeyExistsError: If any key is already set.
            RuntimeError: If the store has been frozen.
        """
        if self._frozen:
            msg = "Cannot change config after the app has started serving requests."
            raise RuntimeError(msg)
        bad = [key for key in values if not _is_uppercase_key(key)]
        if bad:
            raise InvalidConfigKeyError(bad)
        taken = [key for key in values if key in self._data]
        if taken:
            raise ConfigKeyExistsError(taken)
        self._data.update(values)

    def freeze(self) -> None:
        """Make the store read-only for the rest of its life."""
        self._frozen = True
