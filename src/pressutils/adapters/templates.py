"""Template locators and a `string.Template` renderer."""

from __future__ import annotations

import logging
import string
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from pressutils.domain.errors import TemplateRenderError
from pressutils.interfaces.templates import TemplateLocator, TemplateRenderer

logger = logging.getLogger(__name__)

PathLike = str | Path


class LocalTemplateLocator(TemplateLocator):
    """Searches template names across filesystem roots, in order.

    The first root is the most specific (a child theme, say) and wins over
    later ones. Names that would escape their root are ignored.
    """

    def __init__(self, roots: Iterable[PathLike]) -> None:
        self._roots = [Path(root).resolve() for root in roots]

    @property
    def roots(self) -> list[Path]:
        """Search roots in priority order."""
        return list(self._roots)

    def locate(self, names: Sequence[str]) -> Path | None:
        for name in names:
            if not name:
                continue
            for root in self._roots:
                candidate = (root / name).resolve()
                if root not in candidate.parents:
                    logger.warning("Ignoring template outside search root: %s", name)
                    break
                if candidate.is_file():
                    logger.debug("Located template %s at %s", name, candidate)
                    return candidate
        return None


class MemoryTemplateLocator(TemplateLocator):
    """Template locator over an in-memory name -> source mapping.

    Paths returned are virtual; pair it with a renderer that reads
    sources through `source_of`.
    """

    ROOT = Path("/memory")

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._templates = dict(templates or {})

    def add(self, name: str, source: str) -> None:
        """Register a template source under ``name``."""
        self._templates[name] = source

    def source_of(self, path: Path) -> str:
        """Return the source registered for a path returned by `locate`."""
        return self._templates[path.relative_to(self.ROOT).as_posix()]

    def locate(self, names: Sequence[str]) -> Path | None:
        for name in names:
            if name in self._templates:
                return self.ROOT / name
        return None


class StringTemplateRenderer(TemplateRenderer):
    """Renders ``$name`` placeholders with `string.Template`.

    Every placeholder must have a matching variable; ``$$`` escapes a
    literal dollar sign.
    """

    def __init__(
        self, memory: MemoryTemplateLocator | None = None, encoding: str = "utf-8"
    ) -> None:
        self._memory = memory
        self._encoding = encoding

    def render(self, path: Path, variables: Mapping[str, Any]) -> str:
        source = self._read(path)
        try:
            return string.Template(source).substitute(variables)
        except KeyError as e:
            raise TemplateRenderError(str(path), f"missing variable {e.args[0]!r}") from e
        except ValueError as e:
            raise TemplateRenderError(str(path), str(e)) from e

    def _read(self, path: Path) -> str:
        if self._memory is not None and path.is_relative_to(self._memory.ROOT):
            return self._memory.source_of(path)
        try:
            return path.read_text(encoding=self._encoding)
        except OSError as e:
            raise TemplateRenderError(str(path), str(e)) from e
