"""Navigation menu lookup by layout location."""

import logging
from collections.abc import Mapping
from typing import Any

from pressutils.domain.navigation import NavMenu, NavMenuItem
from pressutils.interfaces.navigation import NavMenuRegistry

logger = logging.getLogger(__name__)


def get_nav_menu_by_location(
    registry: NavMenuRegistry, location: str
) -> NavMenu | None:
    """Return the menu assigned to ``location``, or None if there is none."""
    if (menu_id := registry.get_location_menu_id(location)) is None:
        logger.debug("No menu assigned to location %r", location)
        return None
    return registry.get_menu(menu_id)


def get_nav_menu_items_by_location(
    registry: NavMenuRegistry,
    location: str,
    args: Mapping[str, Any] | None = None,
) -> list[NavMenuItem]:
    """Return the items of the menu assigned to ``location``.

    Args:
        registry: The host navigation registry.
        location: Layout location name.
        args: Filter/sort arguments passed through to the registry.

    Returns:
        The ordered menu items, or an empty list if nothing is assigned.
    """
    if (menu_id := registry.get_location_menu_id(location)) is None:
        logger.debug("No menu assigned to location %r", location)
        return []
    return registry.get_menu_items(menu_id, args)
