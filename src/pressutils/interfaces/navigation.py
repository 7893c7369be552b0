"""Interface for the host navigation registry."""

import abc
from collections.abc import Mapping
from typing import Any

from pressutils.domain.navigation import NavMenu, NavMenuItem


class NavMenuRegistry(abc.ABC):
    """Maps symbolic layout locations to editor-assigned menus."""

    @abc.abstractmethod
    def get_location_menu_id(self, location: str) -> int | None:
        """Return the id of the menu assigned to ``location``.

        Returns:
            The menu id, or None if the location is unknown or unassigned.
        """

    @abc.abstractmethod
    def get_menu(self, menu_id: int) -> NavMenu | None:
        """Return the menu with the given id, or None if it does not exist."""

    @abc.abstractmethod
    def get_menu_items(
        self, menu_id: int, args: Mapping[str, Any] | None = None
    ) -> list[NavMenuItem]:
        """Return the items of a menu.

        Args:
            menu_id: The menu to list.
            args: Implementation-defined filter/sort arguments.

        Returns:
            The ordered items, or an empty list if the menu does not exist.
        """

    def has_nav_menu(self, location: str) -> bool:
        """Return True if ``location`` has a menu assigned."""
        return self.get_location_menu_id(location) is not None
