"""Interface for the request-scoped query context.

The context replaces the host's process-wide "current item" slot with an
object the caller owns and passes explicitly. It carries:

* ``current_query``: the query a loop walks by default.
* ``current_item``: the item surrounding rendering code reads implicitly.
* per-item setup/teardown hooks that populate and clear item-scoped data.

A context holds a single slot, not a stack: only one loop may be active on a
given context at a time.
"""

import abc

from pressutils.domain.content import ContentItem, Query


class QueryContext(abc.ABC):
    """Contract for the ambient query state a content loop brackets."""

    current_item: ContentItem | None

    @property
    @abc.abstractmethod
    def current_query(self) -> Query:
        """The query loops walk when none is given."""

    @abc.abstractmethod
    def setup_item(self, item: ContentItem) -> None:
        """Make ``item`` current and populate item-scoped data."""

    @abc.abstractmethod
    def reset_item_data(self) -> None:
        """Clear item-scoped data populated by `setup_item`."""
