"""File and icon objects.

See https://developers.notion.com/reference/file-object and
https://developers.notion.com/reference/emoji-object

Files are either hosted by Notion (``file``, with an expiring signed url) or
external links. The same shapes are used for media block payloads, where a
caption may be attached, and for page/database covers and icons.
"""

from datetime import datetime
from typing import Literal, Optional

from notion_typed.models.base import CatchAllModel, NotionModel, tagged_union
from notion_typed.models.text import RichText


class HostedFile(NotionModel):
    url: str
    expiry_time: datetime | None = None


class ExternalFile(NotionModel):
    url: str


class NotionHostedFile(NotionModel):
    type: Literal["file"] = "file"
    file: HostedFile
    name: str | None = None
    caption: Optional[list[RichText]] = None

    @property
    def url(self) -> str:
        return self.file.url


class ExternalFileObject(NotionModel):
    type: Literal["external"] = "external"
    external: ExternalFile
    name: str | None = None
    caption: Optional[list[RichText]] = None

    @property
    def url(self) -> str:
        return self.external.url


FileObject = tagged_union(NotionHostedFile, ExternalFileObject)
"""A Notion hosted or external file."""


class EmojiIcon(NotionModel):
    type: Literal["emoji"] = "emoji"
    emoji: str


class UnknownIcon(CatchAllModel):
    """Icon kinds not modelled here, e.g. workspace custom emoji."""

    type: str


Icon = tagged_union(EmojiIcon, ExternalFileObject, NotionHostedFile, catch_all=UnknownIcon)
"""Page, database and callout icon."""


__all__ = [
    "HostedFile",
    "ExternalFile",
    "NotionHostedFile",
    "ExternalFileObject",
    "FileObject",
    "EmojiIcon",
    "UnknownIcon",
    "Icon",
]
