"""Request bodies that are not search or query requests."""

from typing import Any, Optional

from notion_typed.models.base import NotionModel
from notion_typed.models.files import FileObject, Icon
from notion_typed.models.parents import Parent


class PageCreateRequest(NotionModel):
    """Body of ``POST /pages``.

    Property values and child blocks use the request-side shapes, which lack
    the ids and timestamps of the response models; build them with the
    helpers in ``notion_typed.builders`` or pass typed property values.

    Attributes:
        parent: A DatabaseParent (properties must follow its schema) or a
            PageParent (only a title property is allowed).
        properties: Property name to value.
        children: Optional initial content as block dicts.
    """

    parent: Parent
    properties: dict[str, Any]
    children: Optional[list[dict[str, Any]]] = None
    icon: Optional[Icon] = None
    cover: Optional[FileObject] = None


__all__ = ["PageCreateRequest"]
