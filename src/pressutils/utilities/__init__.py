"""Helper operations over host collaborators.

Each module covers one concern and takes its collaborators as explicit
arguments. `pressutils.bootstrap.Utilities` binds them to a `Host`.
"""

from .cache_key import build_query, generate_cache_key
from .images import get_post_thumbnail_url
from .walker import ContentLoop, loop
from .navigation import get_nav_menu_by_location, get_nav_menu_items_by_location
from .templates import RESERVED_NAMES, load_template_with_context
from .timezone import get_timezone

__all__ = [
    "ContentLoop",
    "RESERVED_NAMES",
    "build_query",
    "generate_cache_key",
    "get_nav_menu_by_location",
    "get_nav_menu_items_by_location",
    "get_post_thumbnail_url",
    "get_timezone",
    "load_template_with_context",
    "loop",
]
