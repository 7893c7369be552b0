"""In-memory content store."""

from collections.abc import Iterable, Mapping

from pressutils.domain.content import ContentItem, ImageSource
from pressutils.domain.errors import InvalidArgumentError
from pressutils.interfaces.content import ContentStore

FULL_SIZE = "full"
DEFAULT_IMAGE_SIZES = ("thumbnail", "medium", "medium_large", "large", FULL_SIZE)


class MemoryContentStore(ContentStore):
    """Content store holding items and image attachments in dicts.

    Image lookup follows the host's downsizing rules: a generated rendition of
    the requested size wins; a registered size with no rendition falls back to
    the full image; an unregistered size does not resolve.
    """

    def __init__(
        self,
        items: Iterable[ContentItem] = (),
        image_sizes: Iterable[str] = DEFAULT_IMAGE_SIZES,
    ) -> None:
        self._items: dict[int, ContentItem] = {}
        self._images: dict[int, dict[str, ImageSource]] = {}
        self._image_sizes = set(image_sizes) | {FULL_SIZE}
        for item in items:
            self.add_item(item)

    def add_item(self, item: ContentItem) -> None:
        """Store or replace ``item``."""
        self._items[item.id] = item

    def add_image(
        self,
        attachment: ContentItem,
        full: ImageSource,
        renditions: Mapping[str, ImageSource] | None = None,
    ) -> None:
        """Store an image attachment with its full image and generated sizes."""
        unknown = set(renditions or {}) - self._image_sizes
        if unknown:
            raise InvalidArgumentError(
                f"Unregistered image size(s): {', '.join(sorted(unknown))}"
            )
        self.add_item(attachment)
        self._images[attachment.id] = {**(renditions or {}), FULL_SIZE: full}

    def get_item(self, item_id: int) -> ContentItem | None:
        return self._items.get(item_id)

    def get_image_src(self, attachment_id: int, size: str) -> ImageSource | None:
        renditions = self._images.get(attachment_id)
        if renditions is None or size not in self._image_sizes:
            return None
        if size in renditions:
            return renditions[size]
        return renditions[FULL_SIZE]
