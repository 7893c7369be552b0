"""Render a template with an explicit set of variables."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pressutils.domain.errors import TemplateNotFoundError
from pressutils.interfaces.templates import TemplateLocator, TemplateRenderer

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".html"
RESERVED_NAMES = frozenset({"template", "template_file", "extension", "context"})


def load_template_with_context(  # pylint: disable=too-many-arguments
    locator: TemplateLocator,
    renderer: TemplateRenderer,
    template: str | Sequence[str],
    context: Mapping[str, Any] | None = None,
    extension: str = DEFAULT_EXTENSION,
    *,
    required: bool = True,
) -> str | None:
    """Locate the first matching template and render it with ``context``.

    Args:
        locator: Maps candidate names to template files.
        renderer: Executes the located template.
        template: A template name or candidate names in order of preference.
            ``extension`` is appended to names that lack it.
        context: Variables exposed to the template. Names in `RESERVED_NAMES`
            are skipped.
        extension: File extension of templates.
        required: When False, a missing template returns None instead of
            raising.

    Returns:
        The rendered output, or None if no template matched and ``required``
        is False.

    Raises:
        TemplateNotFoundError: If no candidate matched and ``required`` is True.
        TemplateRenderError: If the renderer fails.
    """
    names = [template] if isinstance(template, str) else list(template)
    candidates = [_with_extension(name, extension) for name in names]

    variables: dict[str, Any] = {}
    for name, value in (context or {}).items():
        if name in RESERVED_NAMES:
            logger.warning("Skipping reserved template variable %r", name)
            continue
        variables[name] = value

    if (path := locator.locate(candidates)) is None:
        if required:
            raise TemplateNotFoundError(candidates)
        logger.debug("No template found among %s", candidates)
        return None

    logger.debug("Rendering %s with %d variable(s)", path, len(variables))
    return renderer.render(path, variables)


def _with_extension(name: str, extension: str) -> str:
    if not extension or name.endswith(extension):
        return name
    return f"{name}{extension}"
