"""Interface for the host option (configuration) store."""

import abc
from typing import Any

# pylint: disable=too-few-public-methods


class OptionStore(abc.ABC):
    """Contract for reading named host settings."""

    @abc.abstractmethod
    def get(self, name: str, default: Any = None) -> Any:
        """Return the stored value for ``name``, or ``default`` when unset."""
