"""Request-side builders for blocks, rich text and property values.

Responses decode into typed models, but requests use slimmer shapes: no ids,
no timestamps, no ``plain_text``. These helpers build those shapes as plain
dicts, ready for ``PageCreateRequest`` or a raw ``NotionApi.post``.
"""

from datetime import date, datetime
from typing import Any, Iterable

from notion_typed.ids import AsIdentifier, DatabaseId, PageId, UserId
from notion_typed.models.parents import DatabaseParent, PageParent
from notion_typed.models.requests import PageCreateRequest

TextLike = str | list[dict[str, Any]]


# =============================================================================
# Rich text
# =============================================================================


def make_rich_text(
    content: str,
    link: str | None = None,
    *,
    bold: bool = False,
    italic: bool = False,
    strikethrough: bool = False,
    underline: bool = False,
    code: bool = False,
    color: str | None = None,
) -> dict[str, Any]:
    """Create one text item of a rich text array.

    Args:
        content: The text.
        link: Optional URL the text links to.
        bold, italic, strikethrough, underline, code: Annotations; only the
            ones set to True are sent.
        color: Optional text color, e.g. "red" or "blue_background".

    Returns:
        Rich text item dictionary ready for Notion API.

    Example:
        >>> make_rich_text("Hello", bold=True)
        {'type': 'text', 'text': {'content': 'Hello'}, 'annotations': {'bold': True}}
    """
    text: dict[str, Any] = {"content": content}
    if link:
        text["link"] = {"url": link}
    item: dict[str, Any] = {"type": "text", "text": text}

    flags = {
        "bold": bold,
        "italic": italic,
        "strikethrough": strikethrough,
        "underline": underline,
        "code": code,
    }
    annotations: dict[str, Any] = {name: True for name, value in flags.items() if value}
    if color:
        annotations["color"] = color
    if annotations:
        item["annotations"] = annotations
    return item


def _rich_text(text: TextLike) -> list[dict[str, Any]]:
    if isinstance(text, str):
        return [make_rich_text(text)]
    return list(text)


# =============================================================================
# Blocks
# =============================================================================


def _text_block(block_type: str, text: TextLike, children: list[dict[str, Any]] | None = None, **fields: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {"rich_text": _rich_text(text), **fields}
    if children:
        payload["children"] = children
    return {"type": block_type, block_type: payload}


def make_paragraph(text: TextLike, children: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    """Create a paragraph block.

    Args:
        text: Plain string or a prebuilt rich text array.
        children: Optional nested blocks.

    Returns:
        Paragraph block dictionary ready for Notion API.

    Example:
        >>> make_paragraph("Hello, world!")
        {'type': 'paragraph', 'paragraph': {'rich_text': [...]}}
    """
    return _text_block("paragraph", text, children)


def make_heading(level: int, text: TextLike, is_toggleable: bool = False) -> dict[str, Any]:
    """Create a heading block (level 1, 2, or 3).

    Raises:
        ValueError: If level is not 1, 2, or 3.
    """
    if level not in (1, 2, 3):
        raise ValueError(f"Heading level must be 1, 2, or 3, got {level}")
    fields = {"is_toggleable": True} if is_toggleable else {}
    return _text_block(f"heading_{level}", text, **fields)


def make_toggle(text: TextLike, children: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    return _text_block("toggle", text, children)


def make_bulleted_list_item(text: TextLike, children: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    return _text_block("bulleted_list_item", text, children)


def make_numbered_list_item(text: TextLike, children: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    return _text_block("numbered_list_item", text, children)


def make_quote(text: TextLike) -> dict[str, Any]:
    return _text_block("quote", text)


def make_to_do(text: TextLike, checked: bool = False) -> dict[str, Any]:
    """Create a to-do (checkbox) block.

    Example:
        >>> make_to_do("Buy groceries", checked=True)
        {'type': 'to_do', 'to_do': {'rich_text': [...], 'checked': True}}
    """
    return _text_block("to_do", text, checked=checked)


def make_callout(text: TextLike, icon: str = "💡") -> dict[str, Any]:
    """Create a callout block with an emoji icon."""
    return _text_block("callout", text, icon={"type": "emoji", "emoji": icon})


def make_code(code: str, language: str = "plain text") -> dict[str, Any]:
    """Create a code block.

    Args:
        code: Code content.
        language: Language name as Notion spells it ("python", "c++"...).
    """
    return _text_block("code", code, language=language)


def make_equation(expression: str) -> dict[str, Any]:
    return {"type": "equation", "equation": {"expression": expression}}


def make_bookmark(url: str) -> dict[str, Any]:
    return {"type": "bookmark", "bookmark": {"url": url}}


def make_image(url: str) -> dict[str, Any]:
    """Create an image block pointing at an external URL."""
    return {"type": "image", "image": {"type": "external", "external": {"url": url}}}


def make_divider() -> dict[str, Any]:
    return {"type": "divider", "divider": {}}


# =============================================================================
# Property values
# =============================================================================


def title_value(text: TextLike) -> dict[str, Any]:
    """Value for a title property.

    Example:
        >>> title_value("Groceries")
        {'title': [{'type': 'text', 'text': {'content': 'Groceries'}}]}
    """
    return {"title": _rich_text(text)}


def rich_text_value(text: TextLike) -> dict[str, Any]:
    return {"rich_text": _rich_text(text)}


def number_value(number: int | float | None) -> dict[str, Any]:
    return {"number": number}


def checkbox_value(checked: bool) -> dict[str, Any]:
    return {"checkbox": checked}


def select_value(name: str | None) -> dict[str, Any]:
    """Value for a select property; None clears it."""
    return {"select": {"name": name} if name is not None else None}


def status_value(name: str) -> dict[str, Any]:
    return {"status": {"name": name}}


def multi_select_value(names: Iterable[str]) -> dict[str, Any]:
    return {"multi_select": [{"name": name} for name in names]}


def date_value(
    start: date | datetime,
    end: date | datetime | None = None,
    time_zone: str | None = None,
) -> dict[str, Any]:
    """Value for a date property; pass ``end`` for a range."""
    value: dict[str, Any] = {"start": start.isoformat()}
    if end is not None:
        value["end"] = end.isoformat()
    if time_zone:
        value["time_zone"] = time_zone
    return {"date": value}


def url_value(url: str | None) -> dict[str, Any]:
    return {"url": url}


def email_value(email: str | None) -> dict[str, Any]:
    return {"email": email}


def phone_number_value(phone_number: str | None) -> dict[str, Any]:
    return {"phone_number": phone_number}


def people_value(users: Iterable[UserId]) -> dict[str, Any]:
    return {"people": [{"object": "user", "id": user.value} for user in users]}


def relation_value(pages: Iterable[PageId]) -> dict[str, Any]:
    return {"relation": [{"id": page.value} for page in pages]}


# =============================================================================
# Pages
# =============================================================================


def make_page_request(
    parent: AsIdentifier,
    title: TextLike,
    *,
    title_property: str = "title",
    properties: dict[str, Any] | None = None,
    children: list[dict[str, Any]] | None = None,
) -> PageCreateRequest:
    """Build a PageCreateRequest under a page or in a database.

    Args:
        parent: A PageId/DatabaseId or a Page/Database value.
        title: Page title.
        title_property: Name of the title property. Pages under a page always
            use "title"; databases name it in their schema (often "Name").
        properties: Further property values, keyed by property name.
        children: Optional initial content blocks.

    Returns:
        The request, ready for ``NotionApi.create_page``.

    Raises:
        TypeError: If parent does not identify a page or a database.
    """
    parent_id = parent.as_id() if isinstance(parent, AsIdentifier) else parent
    if isinstance(parent_id, DatabaseId):
        request_parent = DatabaseParent(database_id=parent_id)
    elif isinstance(parent_id, PageId):
        request_parent = PageParent(page_id=parent_id)
    else:
        raise TypeError(f"Page parent must be a page or a database, got {type(parent_id).__name__}")

    values = {title_property: title_value(title)}
    values.update(properties or {})
    return PageCreateRequest(parent=request_parent, properties=values, children=children)


__all__ = [
    "make_rich_text",
    "make_paragraph",
    "make_heading",
    "make_toggle",
    "make_bulleted_list_item",
    "make_numbered_list_item",
    "make_quote",
    "make_to_do",
    "make_callout",
    "make_code",
    "make_equation",
    "make_bookmark",
    "make_image",
    "make_divider",
    "title_value",
    "rich_text_value",
    "number_value",
    "checkbox_value",
    "select_value",
    "status_value",
    "multi_select_value",
    "date_value",
    "url_value",
    "email_value",
    "phone_number_value",
    "people_value",
    "relation_value",
    "make_page_request",
]
