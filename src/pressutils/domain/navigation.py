"""Navigation value objects: menus and their items."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NavMenu:
    """An editor-defined navigation menu."""

    id: int
    name: str
    slug: str = ""
    count: int = 0


@dataclass(frozen=True, slots=True)
class NavMenuItem:
    """A single entry of a navigation menu."""

    id: int
    menu_id: int
    title: str
    url: str
    menu_order: int = 0
    parent_id: int = 0
    object_type: str = "custom"
    object_id: int | None = None
