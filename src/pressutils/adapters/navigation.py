"""In-memory navigation registry."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from pressutils.domain.errors import InvalidArgumentError
from pressutils.domain.navigation import NavMenu, NavMenuItem
from pressutils.interfaces.navigation import NavMenuRegistry

ORDERBY_KEY = "orderby"
ORDER_KEY = "order"
DEFAULT_ORDERBY = "menu_order"
DEFAULT_ORDER = "ASC"
ORDER_DIRECTIONS = ("ASC", "DESC")


class MemoryNavMenuRegistry(NavMenuRegistry):
    """Navigation registry holding locations, menus and items in dicts.

    ``get_menu_items`` understands ``orderby`` (an item attribute, default
    ``menu_order``) and ``order`` (``ASC``/``DESC``); any other argument is an
    attribute-equality filter.
    """

    def __init__(self) -> None:
        self._locations: dict[str, str] = {}
        self._assignments: dict[str, int] = {}
        self._menus: dict[int, NavMenu] = {}
        self._items: dict[int, list[NavMenuItem]] = {}

    # --- Registration ---

    def register_location(self, location: str, description: str = "") -> None:
        """Declare a layout location that menus can be assigned to."""
        self._locations[location] = description or location

    def add_menu(self, menu: NavMenu, items: Iterable[NavMenuItem] = ()) -> NavMenu:
        """Store ``menu`` with its items and return it with an accurate count."""
        menu_items = list(items)
        for item in menu_items:
            if item.menu_id != menu.id:
                raise InvalidArgumentError(
                    f"Menu item {item.id} belongs to menu {item.menu_id}, not {menu.id}"
                )
        stored = replace(menu, count=len(menu_items))
        self._menus[menu.id] = stored
        self._items[menu.id] = menu_items
        return stored

    def assign(self, location: str, menu_id: int) -> None:
        """Assign an existing menu to a registered location."""
        if location not in self._locations:
            raise InvalidArgumentError(f"Unknown menu location: {location!r}")
        if menu_id not in self._menus:
            raise InvalidArgumentError(f"Unknown menu: {menu_id}")
        self._assignments[location] = menu_id

    def unassign(self, location: str) -> None:
        """Remove the menu assigned to ``location``, if any."""
        self._assignments.pop(location, None)

    @property
    def locations(self) -> dict[str, str]:
        """Registered locations and their descriptions."""
        return dict(self._locations)

    # --- NavMenuRegistry ---

    def get_location_menu_id(self, location: str) -> int | None:
        if location not in self._locations:
            return None
        return self._assignments.get(location)

    def get_menu(self, menu_id: int) -> NavMenu | None:
        return self._menus.get(menu_id)

    def get_menu_items(
        self, menu_id: int, args: Mapping[str, Any] | None = None
    ) -> list[NavMenuItem]:
        items = self._items.get(menu_id)
        if items is None:
            return []

        args = dict(args or {})
        orderby = args.pop(ORDERBY_KEY, DEFAULT_ORDERBY)
        order = str(args.pop(ORDER_KEY, DEFAULT_ORDER)).upper()
        if order not in ORDER_DIRECTIONS:
            raise InvalidArgumentError(f"Invalid order direction: {order!r}")
        for name in (orderby, *args):
            if name not in NavMenuItem.__dataclass_fields__:
                raise InvalidArgumentError(f"Unknown menu item field: {name!r}")

        selected = [
            item
            for item in items
            if all(getattr(item, name) == value for name, value in args.items())
        ]
        return sorted(
            selected, key=operator.attrgetter(orderby), reverse=order == "DESC"
        )
