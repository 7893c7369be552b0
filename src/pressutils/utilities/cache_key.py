"""Content-addressed cache keys.

A cache key is the MD5 digest of a name plus its context, serialized as a
query string with keys in a fixed order. Equal names and equal key/value
pairs always produce the same key, whatever order the pairs arrive in.
"""

import hashlib
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any
from urllib.parse import quote_plus

from pressutils.domain.errors import InvalidArgumentError

QUERY_SEPARATOR = "?"
PAIR_SEPARATOR = "&"


def generate_cache_key(name: str, context: Mapping[Any, Any] | None = None) -> str:
    """Generate a stable cache key for ``name`` and its varying context.

    Args:
        name: A unique name for the cached data.
        context: Named values the cached data depends on. Keys are sorted by
            their string form (then type name) before hashing, so insertion
            order is irrelevant.

    Returns:
        The 32-character hexadecimal MD5 digest.

    Raises:
        InvalidArgumentError: If ``context`` is list-shaped (a sequence, or a
            mapping keyed ``0..n-1`` in order). Key the values by name instead.
    """
    if context:
        if _is_list_shaped(context):
            raise InvalidArgumentError(
                "Expected a keyed mapping, but received a list-shaped context."
            )
        ordered = sorted(context.items(), key=_sort_key)
        name = f"{name}{QUERY_SEPARATOR}{build_query(ordered)}"

    return hashlib.md5(name.encode("utf-8"), usedforsecurity=False).hexdigest()


def build_query(pairs: Mapping[Any, Any] | Sequence[tuple[Any, Any]]) -> str:
    """Serialize pairs as an ``application/x-www-form-urlencoded`` string.

    Follows the host encoder: booleans become ``1``/``0``, ``None`` values are
    dropped, nested mappings and sequences expand to ``key[sub]=value``.
    Pair order is preserved.
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    return PAIR_SEPARATOR.join(
        f"{_encode(key)}={_encode(value)}"
        for key, value in _flatten(items, prefix=None)
    )


def _flatten(
    items: Iterable[tuple[Any, Any]], prefix: str | None
) -> Iterator[tuple[str, str]]:
    for key, value in items:
        full_key = str(key) if prefix is None else f"{prefix}[{key}]"
        if value is None:
            continue
        if isinstance(value, Mapping):
            yield from _flatten(value.items(), full_key)
        elif isinstance(value, (list, tuple)):
            yield from _flatten(enumerate(value), full_key)
        else:
            yield full_key, _scalar(value)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _encode(text: str) -> str:
    # the host encoder escapes "~" too
    return quote_plus(text, safe="").replace("~", "%7E")


def _sort_key(pair: tuple[Any, Any]) -> tuple[str, str]:
    # keys sharing a string form (1 and "1") order by type name
    key = pair[0]
    return str(key), type(key).__qualname__


def _is_list_shaped(context: Any) -> bool:
    if isinstance(context, (str, bytes)):
        raise InvalidArgumentError("Context must be a mapping, not a string.")
    if isinstance(context, Sequence):
        return True
    if not isinstance(context, Mapping):
        raise InvalidArgumentError(
            f"Context must be a mapping, received {type(context).__name__} instead."
        )
    return list(context.keys()) == list(range(len(context)))
