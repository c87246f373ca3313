"""Rich text objects.

See https://developers.notion.com/reference/rich-text

Rich text arrays make up every piece of user visible text: block content,
titles, captions and text properties. Each item is a text span, a mention or
an inline equation, and each carries its own ``plain_text`` rendering.
"""

from enum import Enum
from typing import Iterable, Literal, Optional

from notion_typed.ids import DatabaseId, PageId
from notion_typed.models.base import CatchAllModel, DateValue, NotionModel, tagged_union
from notion_typed.models.users import User


class TextColor(str, Enum):
    DEFAULT = "default"
    GRAY = "gray"
    BROWN = "brown"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    RED = "red"
    GRAY_BACKGROUND = "gray_background"
    BROWN_BACKGROUND = "brown_background"
    ORANGE_BACKGROUND = "orange_background"
    YELLOW_BACKGROUND = "yellow_background"
    GREEN_BACKGROUND = "green_background"
    BLUE_BACKGROUND = "blue_background"
    PURPLE_BACKGROUND = "purple_background"
    PINK_BACKGROUND = "pink_background"
    RED_BACKGROUND = "red_background"


class Annotations(NotionModel):
    """Styling applied to a rich text span."""

    bold: bool | None = None
    italic: bool | None = None
    strikethrough: bool | None = None
    underline: bool | None = None
    code: bool | None = None
    color: TextColor | None = None


class RichTextCommon(NotionModel):
    """Fields present on every rich text item."""

    plain_text: str
    href: str | None = None
    annotations: Annotations | None = None


class Link(NotionModel):
    url: str


class TextContent(NotionModel):
    content: str
    link: Link | None = None


class TextRichText(RichTextCommon):
    type: Literal["text"] = "text"
    text: TextContent


class EquationExpression(NotionModel):
    expression: str


class EquationRichText(RichTextCommon):
    type: Literal["equation"] = "equation"
    equation: EquationExpression


# -----------------------------------------------------------------------------
# Mentions
# -----------------------------------------------------------------------------


class PageReference(NotionModel):
    id: PageId


class DatabaseReference(NotionModel):
    id: DatabaseId


class LinkPreviewReference(NotionModel):
    url: str


class UserMention(NotionModel):
    type: Literal["user"] = "user"
    user: User


class PageMention(NotionModel):
    type: Literal["page"] = "page"
    page: PageReference


class DatabaseMention(NotionModel):
    type: Literal["database"] = "database"
    database: DatabaseReference


class DateMention(NotionModel):
    type: Literal["date"] = "date"
    date: DateValue


class LinkPreviewMention(NotionModel):
    type: Literal["link_preview"] = "link_preview"
    link_preview: LinkPreviewReference


class UnknownMention(CatchAllModel):
    """A mention kind this library does not model (templates, custom emoji...)."""

    type: str


Mention = tagged_union(
    UserMention,
    PageMention,
    DatabaseMention,
    DateMention,
    LinkPreviewMention,
    catch_all=UnknownMention,
)


class MentionRichText(RichTextCommon):
    type: Literal["mention"] = "mention"
    mention: Mention


class UnknownRichText(CatchAllModel):
    """A rich text item with an unrecognised ``type``."""

    type: str
    plain_text: str = ""
    href: str | None = None
    annotations: Optional[Annotations] = None


RichText = tagged_union(TextRichText, MentionRichText, EquationRichText, catch_all=UnknownRichText)
"""Any rich text item: text, mention, equation or an unknown kind."""


def plain_text(spans: Iterable[RichText]) -> str:
    """Concatenate the plain text of rich text items, in order.

    Args:
        spans: Rich text items of any variant.

    Returns:
        The flattened text ("" for an empty sequence).
    """
    return "".join(span.plain_text for span in spans)


__all__ = [
    "TextColor",
    "Annotations",
    "RichTextCommon",
    "Link",
    "TextContent",
    "TextRichText",
    "EquationExpression",
    "EquationRichText",
    "PageReference",
    "DatabaseReference",
    "LinkPreviewReference",
    "UserMention",
    "PageMention",
    "DatabaseMention",
    "DateMention",
    "LinkPreviewMention",
    "UnknownMention",
    "Mention",
    "MentionRichText",
    "UnknownRichText",
    "RichText",
    "plain_text",
]
