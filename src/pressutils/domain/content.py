"""Content value objects: items, featured-image sources and query results."""

from dataclasses import dataclass, field
from typing import Any

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True, slots=True)
class ContentItem:
    """A unit of published content (article, page, attachment, ...).

    Attributes:
        id: Host-assigned identifier.
        title: Display title.
        content: Raw body. Page breaks are marked with ``PAGE_BREAK``.
        item_type: Host content type, e.g. ``"post"`` or ``"page"``.
        status: Publication status, e.g. ``"publish"`` or ``"draft"``.
        slug: URL-friendly name.
        author_id: Identifier of the authoring user, if any.
        menu_order: Manual ordering hint used by menus and page lists.
        meta: Free-form metadata. The featured image lives under
            ``THUMBNAIL_META_KEY``.
    """

    id: int
    title: str = ""
    content: str = ""
    item_type: str = "post"
    status: str = "publish"
    slug: str = ""
    author_id: int | None = None
    menu_order: int = 0
    meta: dict[str, Any] = field(default_factory=dict, hash=False)

    PAGE_BREAK = "<!--nextpage-->"
    THUMBNAIL_META_KEY = "_thumbnail_id"

    @property
    def thumbnail_id(self) -> int | None:
        """Identifier of the featured image attachment, if one is designated."""
        raw = self.meta.get(self.THUMBNAIL_META_KEY)
        try:
            value = int(raw)
        except (TypeError, ValueError, OverflowError):
            return None
        return value if value > 0 else None

    @property
    def pages(self) -> list[str]:
        """Body split on page-break markers."""
        return self.content.split(self.PAGE_BREAK)


@dataclass(frozen=True, slots=True)
class ImageSource:
    """A resolved image at a named size."""

    url: str
    width: int
    height: int
    is_intermediate: bool = False


@dataclass(slots=True)
class Query:
    """Result of a content query: the ordered items it produced."""

    items: list[ContentItem | int] = field(default_factory=list)
    args: dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> int:
        """Number of items in the result."""
        return len(self.items)
