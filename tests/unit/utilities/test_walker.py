"""Unit tests for pressutils.utilities.walker.

Covers input normalization, id resolution, and the guarantee that the
context's current item is restored on every exit path: exhaustion, ``break``
inside a ``with`` block, explicit ``close()``, errors and garbage collection.
"""

import gc
import logging

import pytest

from pressutils.adapters.query_context import RequestContext
from pressutils.domain.content import ContentItem, Query
from pressutils.domain.errors import InvalidArgumentError
from pressutils.utilities.walker import ContentLoop, loop

# pylint: disable=redefined-outer-name, magic-value-comparison

SENTINEL = ContentItem(id=42, title="Outer")


@pytest.fixture
def context(request_context: RequestContext) -> RequestContext:
    """Request context with an outer current item already in place."""
    request_context.current_item = SENTINEL
    return request_context


# --- Input normalization ---


def test_explicit_list_is_walked_in_order(context, content_store, items):
    """An explicit list yields its items in order."""
    with loop(context, content_store, [items[0], items[1]]) as walk:
        assert list(walk) == [items[0], items[1]]


def test_ids_are_resolved(context, content_store, items):
    """Integer and numeric-string ids resolve to full items."""
    with loop(context, content_store, [3, "1", items[1]]) as walk:
        assert [item.id for item in walk] == [3, 1, 2]


def test_none_defaults_to_current_query(context, content_store, items):
    """Without an iterable the context's current query is walked."""
    with loop(context, content_store) as walk:
        assert list(walk) == items


def test_query_object_contributes_its_items(context, content_store, items):
    """Any object exposing ``items`` is accepted."""
    query = Query(items=[items[2].id, items[0]])
    with loop(context, content_store, query) as walk:
        assert [item.id for item in walk] == [3, 1]


def test_tuple_is_accepted(context, content_store, items):
    """Tuples are ordered lists too."""
    with loop(context, content_store, (items[2],)) as walk:
        assert list(walk) == [items[2]]


@pytest.mark.parametrize(
    "iterable",
    ["1,2,3", b"12", 7, {"a": 1}, {1, 2}, Query(items=None)],  # type: ignore[arg-type]
    ids=["str", "bytes", "int", "dict", "set", "query-without-list"],
)
def test_unsupported_input_is_rejected(context, content_store, iterable):
    """Other shapes raise invalid-argument before anything is touched."""
    with pytest.raises(InvalidArgumentError):
        loop(context, content_store, iterable)
    assert context.current_item is SENTINEL


def test_unknown_ids_are_skipped(context, content_store, items, caplog):
    """Ids the store cannot resolve are logged and skipped."""
    with caplog.at_level(logging.WARNING, logger="pressutils.utilities.walker"):
        with loop(context, content_store, [999, 1]) as walk:
            assert list(walk) == [items[0]]
    assert "999" in caplog.text


# --- Ambient state ---


def test_each_item_becomes_current(context, content_store, items):
    """While an item is yielded it is the context's current item."""
    seen = []
    with loop(context, content_store, items) as walk:
        for item in walk:
            seen.append((context.current_item, context.item_data["id"]))
    assert seen == [(item, item.id) for item in items]


def test_item_data_is_set_up(context, content_store, items):
    """Item-scoped data reflects the current item's pages."""
    with loop(context, content_store, [items[1]]) as walk:
        next(walk)
        assert context.item_data["numpages"] == 2
        assert context.item_data["multipage"] is True


def test_exhaustion_restores_current_item(context, content_store, items):
    """Running to the end restores the outer item and clears item data."""
    walk = loop(context, content_store, items)
    assert list(walk) == items
    assert walk.closed
    assert context.current_item is SENTINEL
    assert not context.item_data


def test_break_inside_with_restores_current_item(context, content_store, items):
    """Breaking early still restores the outer item once the block exits."""
    with loop(context, content_store, items) as walk:
        for item in walk:
            assert context.current_item is item
            break
    assert context.current_item is SENTINEL


def test_abandoned_loop_is_finalized_on_collection(context, content_store, items):
    """A loop dropped mid-walk restores state when collected."""
    walk = loop(context, content_store, items)
    next(walk)
    del walk
    gc.collect()
    assert context.current_item is SENTINEL


def test_close_is_idempotent(context, content_store, items):
    """Finalization runs exactly once."""
    calls = []
    original_reset = context.reset_item_data

    def counting_reset():
        calls.append(1)
        original_reset()

    context.reset_item_data = counting_reset  # type: ignore[method-assign]
    walk = loop(context, content_store, items)
    next(walk)
    walk.close()
    walk.close()
    with pytest.raises(StopIteration):
        next(walk)
    assert len(calls) == 1
    assert context.current_item is SENTINEL


def test_error_while_resolving_finalizes(context, content_store, items):
    """A bad entry mid-walk raises and still restores the outer item."""
    walk = loop(context, content_store, [items[0], 3.5])  # type: ignore[list-item]
    assert next(walk) is items[0]
    with pytest.raises(InvalidArgumentError):
        next(walk)
    assert walk.closed
    assert context.current_item is SENTINEL


def test_walker_can_be_restarted(context, content_store, items):
    """A fresh loop over the same input walks it again."""
    for _ in range(2):
        with loop(context, content_store, items) as walk:
            assert [item.id for item in walk] == [1, 2, 3]
    assert context.current_item is SENTINEL


def test_loop_returns_content_loop(context, content_store):
    """The walker is an iterator object with an explicit close."""
    walk = loop(context, content_store, [])
    assert isinstance(walk, ContentLoop)
    assert iter(walk) is walk
    assert not list(walk)
