"""Bind the helper operations to a host's collaborators."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pressutils import config
from pressutils.adapters.content import MemoryContentStore
from pressutils.adapters.navigation import MemoryNavMenuRegistry
from pressutils.adapters.options import MemoryOptionStore
from pressutils.adapters.query_context import RequestContext
from pressutils.adapters.templates import LocalTemplateLocator, StringTemplateRenderer
from pressutils.interfaces.content import ContentStore
from pressutils.interfaces.navigation import NavMenuRegistry
from pressutils.interfaces.options import OptionStore
from pressutils.interfaces.query_context import QueryContext
from pressutils.interfaces.templates import TemplateLocator, TemplateRenderer
from pressutils.utilities import (
    cache_key,
    images,
    navigation,
    templates,
    timezone,
    walker,
)

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from pressutils.domain.content import ContentItem, Query
    from pressutils.domain.navigation import NavMenu, NavMenuItem


@dataclass(frozen=True)
class Host:
    """The host collaborators the helpers consult."""

    options: OptionStore
    navigation: NavMenuRegistry
    content: ContentStore
    templates: TemplateLocator
    renderer: TemplateRenderer
    context: QueryContext = field(default_factory=RequestContext)


class Utilities:
    """Helper operations bound to a `Host`."""

    def __init__(self, host: Host, template_extension: str | None = None) -> None:
        self.host = host
        self._template_extension = template_extension or templates.DEFAULT_EXTENSION

    def get_timezone(self) -> ZoneInfo:
        """Return the site timezone (see `pressutils.utilities.timezone`)."""
        return timezone.get_timezone(self.host.options)

    @staticmethod
    def generate_cache_key(name: str, context: Mapping[Any, Any] | None = None) -> str:
        """Return a stable cache key (see `pressutils.utilities.cache_key`)."""
        return cache_key.generate_cache_key(name, context)

    def get_nav_menu_by_location(self, location: str) -> NavMenu | None:
        """Return the menu assigned to ``location``, or None."""
        return navigation.get_nav_menu_by_location(self.host.navigation, location)

    def get_nav_menu_items_by_location(
        self, location: str, args: Mapping[str, Any] | None = None
    ) -> list[NavMenuItem]:
        """Return the items of the menu assigned to ``location``, or []."""
        return navigation.get_nav_menu_items_by_location(
            self.host.navigation, location, args
        )

    def get_post_thumbnail_url(
        self, item: ContentItem | int, size: str = images.DEFAULT_SIZE
    ) -> str:
        """Return an item's featured image URL, or ""."""
        return images.get_post_thumbnail_url(self.host.content, item, size)

    def load_template_with_context(
        self,
        template: str | Sequence[str],
        context: Mapping[str, Any] | None = None,
        extension: str | None = None,
        *,
        required: bool = True,
    ) -> str | None:
        """Render the first matching template with ``context``."""
        return templates.load_template_with_context(
            self.host.templates,
            self.host.renderer,
            template,
            context,
            extension if extension is not None else self._template_extension,
            required=required,
        )

    def loop(
        self, iterable: Query | Sequence[ContentItem | int] | None = None
    ) -> walker.ContentLoop:
        """Walk content items against the host's query context."""
        return walker.loop(self.host.context, self.host.content, iterable)


def build_host(  # pylint: disable=too-many-arguments
    *,
    options: OptionStore | None = None,
    navigation_registry: NavMenuRegistry | None = None,
    content: ContentStore | None = None,
    locator: TemplateLocator | None = None,
    renderer: TemplateRenderer | None = None,
    context: QueryContext | None = None,
) -> Host:
    """Build a `Host`, filling any missing collaborator with an in-memory one.

    Without a locator, templates are searched under the configured template
    path.
    """
    if locator is None:
        locator = LocalTemplateLocator(config.get_template_dirs())
    return Host(
        options=options if options is not None else MemoryOptionStore(),
        navigation=(
            navigation_registry
            if navigation_registry is not None
            else MemoryNavMenuRegistry()
        ),
        content=content if content is not None else MemoryContentStore(),
        templates=locator,
        renderer=renderer if renderer is not None else StringTemplateRenderer(),
        context=context if context is not None else RequestContext(),
    )


def bootstrap(**collaborators: Any) -> Utilities:
    """Build `Utilities` over a host assembled by `build_host`.

    Raises:
        TemplatePathNotSetError: If no locator is given and
            `PRESSUTILS_TEMPLATE_PATH` is not set.
    """
    return Utilities(
        build_host(**collaborators),
        template_extension=config.get_template_extension(),
    )
