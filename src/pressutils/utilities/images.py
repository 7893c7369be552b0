"""Featured image URLs."""

from pressutils.domain.content import ContentItem
from pressutils.interfaces.content import ContentStore

DEFAULT_SIZE = "full"


def get_post_thumbnail_url(
    content: ContentStore, item: ContentItem | int, size: str = DEFAULT_SIZE
) -> str:
    """Return the URL of an item's featured image at a named size.

    Returns:
        The URL, or an empty string if the item does not resolve, has no
        featured image, or the size cannot be resolved.
    """
    resolved = content.resolve(item)
    if resolved is None or (thumbnail_id := resolved.thumbnail_id) is None:
        return ""
    image = content.get_image_src(thumbnail_id, size)
    return image.url if image is not None else ""
