"""In-memory option store."""

from collections.abc import Mapping
from typing import Any

from pressutils.interfaces.options import OptionStore


class MemoryOptionStore(OptionStore):
    """Option store backed by a plain dict."""

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self._options: dict[str, Any] = dict(options or {})

    def get(self, name: str, default: Any = None) -> Any:
        return self._options.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """Store ``value`` under ``name``."""
        self._options[name] = value

    def delete(self, name: str) -> None:
        """Remove ``name`` if present."""
        self._options.pop(name, None)
