"""A restartable walk over content items with guaranteed cleanup.

`loop` replaces the host's manual iteration idiom::

    with loop(context, content, query) as items:
        for item in items:
            ...

Each yielded item becomes ``context.current_item`` and has its item-scoped
data set up. When the walk ends (exhaustion, ``break`` followed by leaving
the ``with`` block, `ContentLoop.close`, an error, or garbage collection) the
item-scoped data is reset and the current item that was in place before the
walk is restored. Finalization runs exactly once.

A context has a single current-item slot: do not interleave two walks on
the same context.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from types import TracebackType
from typing import Any

from pressutils.domain.content import ContentItem, Query
from pressutils.domain.errors import InvalidArgumentError
from pressutils.interfaces.content import ContentStore
from pressutils.interfaces.query_context import QueryContext

logger = logging.getLogger(__name__)

ItemReference = ContentItem | int


class ContentLoop(Iterator[ContentItem]):
    """Iterator over content items that brackets the context's current item."""

    def __init__(
        self,
        context: QueryContext,
        content: ContentStore,
        entries: Sequence[ItemReference | str],
    ) -> None:
        self._context = context
        self._content = content
        self._entries = iter(list(entries))
        self._saved = context.current_item
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once finalization has run."""
        return self._closed

    def __iter__(self) -> ContentLoop:
        return self

    def __next__(self) -> ContentItem:
        if self._closed:
            raise StopIteration
        try:
            item = self._next_item()
            self._context.setup_item(item)
        except BaseException:
            self.close()
            raise
        return item

    def close(self) -> None:
        """Reset item-scoped data and restore the saved current item."""
        if self._closed:
            return
        self._closed = True
        try:
            self._context.reset_item_data()
        finally:
            self._context.current_item = self._saved

    def __enter__(self) -> ContentLoop:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        # mirrors generator finalization when a loop is abandoned mid-walk
        if not getattr(self, "_closed", True):
            self.close()

    def _next_item(self) -> ContentItem:
        for entry in self._entries:
            if isinstance(entry, ContentItem):
                return entry
            item_id = _as_item_id(entry)
            if (item := self._content.get_item(item_id)) is not None:
                return item
            logger.warning("Skipping unknown content item %s", item_id)
        raise StopIteration


def loop(
    context: QueryContext,
    content: ContentStore,
    iterable: Query | Sequence[ItemReference] | None = None,
) -> ContentLoop:
    """Walk content items, making each one current in ``context``.

    Args:
        context: The request-scoped query context.
        content: Resolves item ids to items.
        iterable: A list or tuple of items and/or ids, a query result exposing
            ``items``, or None for ``context.current_query``.

    Returns:
        A `ContentLoop`; use it as a context manager to bound the walk.

    Raises:
        InvalidArgumentError: If ``iterable`` is of any other shape.
    """
    if iterable is None:
        iterable = context.current_query

    if isinstance(iterable, (list, tuple)):
        entries = iterable
    elif not isinstance(iterable, (str, bytes)) and hasattr(iterable, "items"):
        entries = _items_of(iterable)
    else:
        raise InvalidArgumentError(
            "Expected None, a query result or a list of content items, "
            f"received {type(iterable).__name__} instead."
        )
    return ContentLoop(context, content, entries)


def _items_of(query: Any) -> Sequence[ItemReference]:
    items = query.items
    if not isinstance(items, (list, tuple)):
        raise InvalidArgumentError(
            f"Query items must be a list, received {type(items).__name__} instead."
        )
    return items


def _as_item_id(entry: Any) -> int:
    if isinstance(entry, bool):
        raise InvalidArgumentError(f"Expected a content item or id, received {entry!r}")
    if isinstance(entry, int):
        return entry
    if isinstance(entry, str) and entry.strip().isdigit():
        return int(entry)
    raise InvalidArgumentError(
        f"Expected a content item or id, received {type(entry).__name__} instead."
    )
