"""Request-scoped query context."""

from __future__ import annotations

from typing import Any

from pressutils.domain.content import ContentItem, Query
from pressutils.interfaces.query_context import QueryContext


class RequestContext(QueryContext):
    """Query context for a single request.

    `setup_item` fills ``item_data`` with the values templates usually read
    implicitly (id, title, type, author, page count). `reset_item_data` clears
    it and, like the host, points ``current_item`` back at the query's first
    resolved item.
    """

    def __init__(
        self, query: Query | None = None, current_item: ContentItem | None = None
    ) -> None:
        self._query = query if query is not None else Query()
        self.current_item = current_item
        self.item_data: dict[str, Any] = {}

    @property
    def current_query(self) -> Query:
        return self._query

    @current_query.setter
    def current_query(self, query: Query) -> None:
        self._query = query

    def setup_item(self, item: ContentItem) -> None:
        self.current_item = item
        pages = item.pages
        self.item_data = {
            "id": item.id,
            "title": item.title,
            "item_type": item.item_type,
            "author_id": item.author_id,
            "page": 1,
            "pages": pages,
            "numpages": len(pages),
            "multipage": len(pages) > 1,
        }

    def reset_item_data(self) -> None:
        self.item_data = {}
        first = next(
            (entry for entry in self._query.items if isinstance(entry, ContentItem)),
            None,
        )
        self.current_item = first
