"""Interfaces for locating and rendering templates."""

import abc
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

# pylint: disable=too-few-public-methods


class TemplateLocator(abc.ABC):
    """Maps candidate template names to files in host search locations."""

    @abc.abstractmethod
    def locate(self, names: Sequence[str]) -> Path | None:
        """Return the first candidate that exists.

        Args:
            names: Candidate template names, in order of preference.

        Returns:
            The path of the first match, or None if nothing matched.
        """


class TemplateRenderer(abc.ABC):
    """Executes a located template with explicit variables."""

    @abc.abstractmethod
    def render(self, path: Path, variables: Mapping[str, Any]) -> str:
        """Render the template at ``path``.

        Raises:
            TemplateRenderError: If the template cannot be rendered.
        """
