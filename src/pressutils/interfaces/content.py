"""Interface for the host content store."""

import abc

from pressutils.domain.content import ContentItem, ImageSource


class ContentStore(abc.ABC):
    """Resolves content items and their attachments."""

    @abc.abstractmethod
    def get_item(self, item_id: int) -> ContentItem | None:
        """Return the content item with ``item_id``, or None if unknown."""

    @abc.abstractmethod
    def get_image_src(self, attachment_id: int, size: str) -> ImageSource | None:
        """Return an attachment's image at a named size.

        Args:
            attachment_id: Identifier of the image attachment.
            size: Named size such as ``"thumbnail"`` or ``"full"``.

        Returns:
            The resolved image, or None if the attachment is not an image or
            the size cannot be resolved.
        """

    def resolve(self, item: ContentItem | int) -> ContentItem | None:
        """Normalize an item reference (object or id) to a ContentItem."""
        if isinstance(item, ContentItem):
            return item
        return self.get_item(item)
