"""Block objects.

See https://developers.notion.com/reference/block

A block document is flat: the common fields (id, timestamps, authors) sit next
to ``type`` and a payload keyed by that same type name::

    {"object": "block", "id": "...", "type": "paragraph",
     "paragraph": {"rich_text": [...], "color": "default"}, ...}

Each block type is a model inheriting BlockCommon with one payload field.
Nested ``children`` use the same Block union recursively.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import ConfigDict, Field

from notion_typed.ids import BlockId, DatabaseId, PageId
from notion_typed.models.base import CatchAllModel, EmptyObject, NotionModel, tagged_union
from notion_typed.models.files import FileObject, Icon
from notion_typed.models.parents import Parent
from notion_typed.models.text import RichText, TextColor
from notion_typed.models.users import UserCommon


class BaseBlock(NotionModel):
    """Root of every block model, including UnknownBlock."""

    object: Literal["block"] = "block"


class BlockCommon(BaseBlock):
    """Fields shared by all recognised block types."""

    id: BlockId
    created_time: datetime
    last_edited_time: datetime
    created_by: UserCommon
    last_edited_by: UserCommon
    has_children: bool = False
    archived: bool | None = None
    parent: Optional[Parent] = None

    def as_id(self) -> BlockId:
        return self.id

    @property
    def content(self) -> Any:
        """The type specific payload (``block.paragraph`` for a paragraph...)."""
        return getattr(self, self.type)


# =============================================================================
# Payloads
# =============================================================================


class TextBlockContent(NotionModel):
    """Payload of paragraph, quote, list items and toggles."""

    rich_text: list[RichText] = Field(default_factory=list)
    color: TextColor = TextColor.DEFAULT
    children: Optional[list["Block"]] = None


class HeadingContent(TextBlockContent):
    is_toggleable: bool = False


class CalloutContent(TextBlockContent):
    icon: Optional[Icon] = None


class ToDoContent(TextBlockContent):
    checked: bool = False


class CodeContent(NotionModel):
    rich_text: list[RichText] = Field(default_factory=list)
    caption: list[RichText] = Field(default_factory=list)
    # Kept as a string, Notion adds languages without notice
    language: str = "plain text"


class TitleContent(NotionModel):
    title: str


class EmbedContent(NotionModel):
    url: str
    caption: Optional[list[RichText]] = None


class BookmarkContent(NotionModel):
    url: str
    caption: list[RichText] = Field(default_factory=list)


class LinkPreviewContent(NotionModel):
    url: str


class EquationContent(NotionModel):
    expression: str


class TableOfContentsContent(NotionModel):
    color: TextColor = TextColor.DEFAULT


class ColumnListContent(NotionModel):
    children: list["Block"] = Field(default_factory=list)


class ColumnContent(NotionModel):
    children: list["Block"] = Field(default_factory=list)
    # Fraction of the row taken by this column, absent for equal widths
    width_ratio: float | None = None


class TemplateContent(NotionModel):
    rich_text: list[RichText] = Field(default_factory=list)
    children: list["Block"] = Field(default_factory=list)


class PageLink(NotionModel):
    type: Literal["page_id"] = "page_id"
    page_id: PageId


class DatabaseLink(NotionModel):
    type: Literal["database_id"] = "database_id"
    database_id: DatabaseId


class UnknownLink(CatchAllModel):
    type: str


LinkTarget = tagged_union(PageLink, DatabaseLink, catch_all=UnknownLink)


class SyncedFrom(NotionModel):
    type: Literal["block_id"] = "block_id"
    block_id: BlockId


class SyncedBlockContent(NotionModel):
    """Original blocks have no ``synced_from``; duplicates point at the original."""

    synced_from: Optional[SyncedFrom] = None
    children: list["Block"] = Field(default_factory=list)


class TableContent(NotionModel):
    table_width: int
    has_column_header: bool = False
    has_row_header: bool = False
    children: list["Block"] = Field(default_factory=list)


class TableRowContent(NotionModel):
    # One rich text array per cell
    cells: list[list[RichText]] = Field(default_factory=list)


# =============================================================================
# Block types
# =============================================================================


class ParagraphBlock(BlockCommon):
    type: Literal["paragraph"] = "paragraph"
    paragraph: TextBlockContent


class Heading1Block(BlockCommon):
    type: Literal["heading_1"] = "heading_1"
    heading_1: HeadingContent


class Heading2Block(BlockCommon):
    type: Literal["heading_2"] = "heading_2"
    heading_2: HeadingContent


class Heading3Block(BlockCommon):
    type: Literal["heading_3"] = "heading_3"
    heading_3: HeadingContent


class CalloutBlock(BlockCommon):
    type: Literal["callout"] = "callout"
    callout: CalloutContent


class QuoteBlock(BlockCommon):
    type: Literal["quote"] = "quote"
    quote: TextBlockContent


class BulletedListItemBlock(BlockCommon):
    type: Literal["bulleted_list_item"] = "bulleted_list_item"
    bulleted_list_item: TextBlockContent


class NumberedListItemBlock(BlockCommon):
    type: Literal["numbered_list_item"] = "numbered_list_item"
    numbered_list_item: TextBlockContent


class ToDoBlock(BlockCommon):
    type: Literal["to_do"] = "to_do"
    to_do: ToDoContent


class ToggleBlock(BlockCommon):
    type: Literal["toggle"] = "toggle"
    toggle: TextBlockContent


class CodeBlock(BlockCommon):
    type: Literal["code"] = "code"
    code: CodeContent


class ChildPageBlock(BlockCommon):
    type: Literal["child_page"] = "child_page"
    child_page: TitleContent


class ChildDatabaseBlock(BlockCommon):
    type: Literal["child_database"] = "child_database"
    child_database: TitleContent


class EmbedBlock(BlockCommon):
    type: Literal["embed"] = "embed"
    embed: EmbedContent


class ImageBlock(BlockCommon):
    type: Literal["image"] = "image"
    image: FileObject


class VideoBlock(BlockCommon):
    type: Literal["video"] = "video"
    video: FileObject


class AudioBlock(BlockCommon):
    type: Literal["audio"] = "audio"
    audio: FileObject


class FileBlock(BlockCommon):
    type: Literal["file"] = "file"
    file: FileObject


class PdfBlock(BlockCommon):
    type: Literal["pdf"] = "pdf"
    pdf: FileObject


class BookmarkBlock(BlockCommon):
    type: Literal["bookmark"] = "bookmark"
    bookmark: BookmarkContent


class EquationBlock(BlockCommon):
    type: Literal["equation"] = "equation"
    equation: EquationContent


class DividerBlock(BlockCommon):
    type: Literal["divider"] = "divider"
    divider: EmptyObject = Field(default_factory=EmptyObject)


class TableOfContentsBlock(BlockCommon):
    type: Literal["table_of_contents"] = "table_of_contents"
    table_of_contents: TableOfContentsContent = Field(default_factory=TableOfContentsContent)


class BreadcrumbBlock(BlockCommon):
    type: Literal["breadcrumb"] = "breadcrumb"
    breadcrumb: EmptyObject = Field(default_factory=EmptyObject)


class ColumnListBlock(BlockCommon):
    type: Literal["column_list"] = "column_list"
    column_list: ColumnListContent = Field(default_factory=ColumnListContent)


class ColumnBlock(BlockCommon):
    type: Literal["column"] = "column"
    column: ColumnContent = Field(default_factory=ColumnContent)


class LinkPreviewBlock(BlockCommon):
    type: Literal["link_preview"] = "link_preview"
    link_preview: LinkPreviewContent


class TemplateBlock(BlockCommon):
    type: Literal["template"] = "template"
    template: TemplateContent = Field(default_factory=TemplateContent)


class LinkToPageBlock(BlockCommon):
    type: Literal["link_to_page"] = "link_to_page"
    link_to_page: LinkTarget


class SyncedBlock(BlockCommon):
    type: Literal["synced_block"] = "synced_block"
    synced_block: SyncedBlockContent = Field(default_factory=SyncedBlockContent)


class TableBlock(BlockCommon):
    type: Literal["table"] = "table"
    table: TableContent


class TableRowBlock(BlockCommon):
    type: Literal["table_row"] = "table_row"
    table_row: TableRowContent = Field(default_factory=TableRowContent)


class UnsupportedBlock(BlockCommon):
    """A block the API itself cannot represent (e.g. some embeds)."""

    type: Literal["unsupported"] = "unsupported"
    unsupported: EmptyObject = Field(default_factory=EmptyObject)


class UnknownBlock(BaseBlock):
    """A block type this library does not model.

    All fields of the document are kept as extra fields. Because the shape is
    unknown the block has no usable identifier: ``as_id()`` raises.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    type: str | None = None

    def as_id(self) -> BlockId:
        raise RuntimeError(
            f"Unknown block type {self.type!r} has no typed id; read the raw 'id' field instead"
        )


BLOCK_TYPES: tuple[type[BlockCommon], ...] = (
    ParagraphBlock,
    Heading1Block,
    Heading2Block,
    Heading3Block,
    CalloutBlock,
    QuoteBlock,
    BulletedListItemBlock,
    NumberedListItemBlock,
    ToDoBlock,
    ToggleBlock,
    CodeBlock,
    ChildPageBlock,
    ChildDatabaseBlock,
    EmbedBlock,
    ImageBlock,
    VideoBlock,
    AudioBlock,
    FileBlock,
    PdfBlock,
    BookmarkBlock,
    EquationBlock,
    DividerBlock,
    TableOfContentsBlock,
    BreadcrumbBlock,
    ColumnListBlock,
    ColumnBlock,
    LinkPreviewBlock,
    TemplateBlock,
    LinkToPageBlock,
    SyncedBlock,
    TableBlock,
    TableRowBlock,
    UnsupportedBlock,
)

Block = tagged_union(*BLOCK_TYPES, catch_all=UnknownBlock)
"""Any block; unrecognised types decode as UnknownBlock."""

# Payloads holding nested children refer back to Block
for _model in (
    TextBlockContent,
    HeadingContent,
    CalloutContent,
    ToDoContent,
    ColumnListContent,
    ColumnContent,
    TemplateContent,
    SyncedBlockContent,
    TableContent,
    *BLOCK_TYPES,
):
    _model.model_rebuild()
del _model


__all__ = [
    "BaseBlock",
    "BlockCommon",
    "TextBlockContent",
    "HeadingContent",
    "CalloutContent",
    "ToDoContent",
    "CodeContent",
    "TitleContent",
    "EmbedContent",
    "BookmarkContent",
    "LinkPreviewContent",
    "EquationContent",
    "TableOfContentsContent",
    "ColumnListContent",
    "ColumnContent",
    "TemplateContent",
    "PageLink",
    "DatabaseLink",
    "UnknownLink",
    "LinkTarget",
    "SyncedFrom",
    "SyncedBlockContent",
    "TableContent",
    "TableRowContent",
    "ParagraphBlock",
    "Heading1Block",
    "Heading2Block",
    "Heading3Block",
    "CalloutBlock",
    "QuoteBlock",
    "BulletedListItemBlock",
    "NumberedListItemBlock",
    "ToDoBlock",
    "ToggleBlock",
    "CodeBlock",
    "ChildPageBlock",
    "ChildDatabaseBlock",
    "EmbedBlock",
    "ImageBlock",
    "VideoBlock",
    "AudioBlock",
    "FileBlock",
    "PdfBlock",
    "BookmarkBlock",
    "EquationBlock",
    "DividerBlock",
    "TableOfContentsBlock",
    "BreadcrumbBlock",
    "ColumnListBlock",
    "ColumnBlock",
    "LinkPreviewBlock",
    "TemplateBlock",
    "LinkToPageBlock",
    "SyncedBlock",
    "TableBlock",
    "TableRowBlock",
    "UnsupportedBlock",
    "UnknownBlock",
    "BLOCK_TYPES",
    "Block",
]
