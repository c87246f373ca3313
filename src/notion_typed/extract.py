"""Plain text rendering of typed blocks.

Gives a compact, stable text form of any block for display, comparison and
hashing. Nested children are not included; walk them separately.
"""

import logging

from notion_typed.models import blocks as b
from notion_typed.models.files import EmojiIcon, ExternalFileObject, NotionHostedFile
from notion_typed.models.text import plain_text

logger = logging.getLogger(__name__)

# Blocks whose payload is rich text plus optional children
TEXT_BLOCK_TYPES = (
    b.ParagraphBlock,
    b.Heading1Block,
    b.Heading2Block,
    b.Heading3Block,
    b.BulletedListItemBlock,
    b.NumberedListItemBlock,
    b.QuoteBlock,
    b.CalloutBlock,
    b.ToggleBlock,
    b.ToDoBlock,
)

MEDIA_BLOCK_TYPES = (b.ImageBlock, b.VideoBlock, b.AudioBlock, b.FileBlock, b.PdfBlock)


def extract_rich_text(rich_text) -> str:
    """Extract plain text from a rich text array.

    Works with both decoded RichText models and request-side dicts built by
    ``notion_typed.builders`` (which carry ``text.content`` instead of
    ``plain_text``).

    Args:
        rich_text: List of RichText models or rich text dicts.

    Returns:
        Concatenated plain text from all segments.
    """
    if not rich_text:
        return ""
    texts = []
    for item in rich_text:
        if not isinstance(item, dict):
            texts.append(item.plain_text)
        elif "plain_text" in item:
            texts.append(item["plain_text"])
        elif "text" in item and "content" in item["text"]:
            texts.append(item["text"]["content"])
    return "".join(texts)


def extract_block_text(block) -> str:
    """Extract plain text content from a block.

    - Text blocks (paragraph, heading_*, list items, quote, callout, toggle):
      the plain text, with the emoji of a callout and ``[x]``/``[ ]`` for a to-do
    - Code: the text fenced with its language
    - Divider: "---"
    - Table: "table:{width}" plus the rows when children are embedded
    - Media and bookmarks: "{type}:{caption or url}"
    - Structural blocks: the type name
    - Unsupported and unknown blocks: ""

    Args:
        block: Any Block model.

    Returns:
        Plain text representation of the block content.
    """
    if isinstance(block, TEXT_BLOCK_TYPES):
        content = block.content
        text = plain_text(content.rich_text)

        if isinstance(block, b.CalloutBlock) and isinstance(content.icon, EmojiIcon):
            emoji = content.icon.emoji
            text = f"{emoji} {text}" if text else emoji

        if isinstance(block, b.ToDoBlock):
            prefix = "[x]" if content.checked else "[ ]"
            text = f"{prefix} {text}"

        return text

    if isinstance(block, b.CodeBlock):
        return f"```{block.code.language}\n{plain_text(block.code.rich_text)}\n```"

    if isinstance(block, b.DividerBlock):
        return "---"

    if isinstance(block, b.TableBlock):
        width = block.table.table_width
        rows = [
            "|".join(plain_text(cell) for cell in child.table_row.cells)
            for child in block.table.children
            if isinstance(child, b.TableRowBlock)
        ]
        if rows:
            return f"table:{width}:{';'.join(rows)}"
        return f"table:{width}"

    if isinstance(block, b.TableRowBlock):
        return " | ".join(plain_text(cell) for cell in block.table_row.cells)

    if isinstance(block, MEDIA_BLOCK_TYPES):
        media = block.content
        caption = plain_text(media.caption or [])
        if caption:
            return f"{block.type}:{caption}"
        if isinstance(media, (ExternalFileObject, NotionHostedFile)):
            return f"{block.type}:{media.url}"
        return block.type

    if isinstance(block, b.BookmarkBlock):
        caption = plain_text(block.bookmark.caption)
        return f"bookmark:{caption or block.bookmark.url}"

    if isinstance(block, b.EmbedBlock):
        return f"embed:{block.embed.url}"

    if isinstance(block, b.EquationBlock):
        return f"equation:{block.equation.expression}"

    if isinstance(block, b.LinkPreviewBlock):
        return f"link:{block.link_preview.url}"

    if isinstance(block, (b.TableOfContentsBlock, b.BreadcrumbBlock, b.ColumnListBlock)):
        return block.type

    if isinstance(block, b.ColumnBlock):
        # 0 is a valid ratio, only None means "not set"
        if block.column.width_ratio is not None:
            return f"column:{block.column.width_ratio}"
        return "column"

    if isinstance(block, b.ChildPageBlock):
        return f"child_page:{block.child_page.title}"

    if isinstance(block, b.ChildDatabaseBlock):
        return f"child_database:{block.child_database.title}"

    if isinstance(block, b.SyncedBlock):
        synced_from = block.synced_block.synced_from
        if synced_from:
            return f"synced_block:{synced_from.block_id}"
        return "synced_block:original"

    if isinstance(block, b.TemplateBlock):
        return f"template:{plain_text(block.template.rich_text)}"

    if isinstance(block, b.LinkToPageBlock):
        target = block.link_to_page
        target_id = getattr(target, "page_id", None) or getattr(target, "database_id", None) or ""
        return f"link_to_page:{target_id}"

    if isinstance(block, b.UnknownBlock):
        logger.debug(f"Unknown block type for text extraction: {block.type}")

    return ""


__all__ = ["extract_block_text", "extract_rich_text", "TEXT_BLOCK_TYPES", "MEDIA_BLOCK_TYPES"]
