"""Top-level objects and the response envelope.

Every response body is one of: a block, a database, a page, a list, a user or
an error, told apart by the ``object`` field. ``parse_object`` decodes a body
into exactly one of these. List responses are narrowed to the element type an
operation expects with the ``expect_*`` methods (strict) or
``only_databases`` (drops everything else).
"""

import logging
from datetime import datetime
from typing import Any, Generic, Iterator, Literal, Optional, TypeVar, Union

from pydantic import ConfigDict, Field, RootModel, TypeAdapter, ValidationError

from notion_typed.errors import DecodeError, UnexpectedResponseError
from notion_typed.ids import DatabaseId, PageId
from notion_typed.models.base import CATCH_ALL, NotionModel, read_tag, tags_of, union_of
from notion_typed.models.blocks import BLOCK_TYPES, BaseBlock, Block, UnknownBlock
from notion_typed.models.error import ErrorResponse
from notion_typed.models.files import FileObject, Icon
from notion_typed.models.paging import PagingCursor
from notion_typed.models.parents import Parent
from notion_typed.models.properties import PropertyConfiguration, PropertyValue, TitleProperty
from notion_typed.models.text import RichText, plain_text
from notion_typed.models.users import USER_TYPES, User, UserCommon

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Pages and databases
# =============================================================================


class Properties(RootModel[dict[str, PropertyValue]]):
    """A page's property values keyed by property name."""

    model_config = ConfigDict(frozen=True)

    def __getitem__(self, name: str):
        return self.root[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def get(self, name: str, default: Any = None) -> Any:
        return self.root.get(name, default)

    def items(self):
        return self.root.items()

    def title(self) -> str | None:
        """Plain text of the title property, or None if the page has none."""
        for value in self.root.values():
            if isinstance(value, TitleProperty):
                return plain_text(value.title)
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Page(NotionModel):
    """A page; inside a database its properties follow the database schema."""

    object: Literal["page"] = "page"
    id: PageId
    created_time: datetime
    last_edited_time: datetime
    created_by: Optional[UserCommon] = None
    last_edited_by: Optional[UserCommon] = None
    archived: bool = False
    icon: Optional[Icon] = None
    cover: Optional[FileObject] = None
    properties: Properties = Field(default_factory=lambda: Properties({}))
    parent: Parent
    url: str | None = None
    public_url: str | None = None

    def as_id(self) -> PageId:
        return self.id

    def title(self) -> str | None:
        return self.properties.title()


class Database(NotionModel):
    """A database and its property schema."""

    object: Literal["database"] = "database"
    id: DatabaseId
    created_time: datetime
    last_edited_time: datetime
    created_by: Optional[UserCommon] = None
    last_edited_by: Optional[UserCommon] = None
    title: list[RichText] = Field(default_factory=list)
    description: list[RichText] = Field(default_factory=list)
    icon: Optional[Icon] = None
    cover: Optional[FileObject] = None
    properties: dict[str, PropertyConfiguration] = Field(default_factory=dict)
    parent: Optional[Parent] = None
    url: str | None = None
    archived: bool = False
    is_inline: bool | None = None

    def as_id(self) -> DatabaseId:
        return self.id

    def title_plain_text(self) -> str:
        return plain_text(self.title)


# =============================================================================
# Lists
# =============================================================================


class ListResponse(NotionModel, Generic[T]):
    """One page of results.

    See https://developers.notion.com/reference/pagination#responses
    """

    object: Literal["list"] = "list"
    results: list[T] = Field(default_factory=list)
    next_cursor: Optional[PagingCursor] = None
    has_more: bool = False
    type: str | None = None

    def _rebuild(self, kind: Any, results: list) -> "ListResponse":
        return ListResponse[kind](results=results, next_cursor=self.next_cursor, has_more=self.has_more, type=self.type)

    def _expect(self, kind: Any, check: type) -> "ListResponse":
        for item in self.results:
            if not isinstance(item, check):
                raise UnexpectedResponseError(item)
        return self._rebuild(kind, list(self.results))

    def only_databases(self) -> "ListResponse[Database]":
        """Keep the databases, silently dropping every other result.

        Cursor and ``has_more`` are carried over unchanged, so the result may
        be shorter than the page size while more data is available.
        """
        return self._rebuild(Database, [item for item in self.results if isinstance(item, Database)])

    def expect_databases(self) -> "ListResponse[Database]":
        """Narrow to databases.

        Raises:
            UnexpectedResponseError: On the first result that is not a database.
        """
        return self._expect(Database, Database)

    def expect_pages(self) -> "ListResponse[Page]":
        return self._expect(Page, Page)

    def expect_blocks(self) -> "ListResponse[Block]":
        return self._expect(Block, BaseBlock)

    def expect_users(self) -> "ListResponse[User]":
        return self._expect(User, UserCommon)


class ObjectList(ListResponse[Any]):
    """A list whose results are any kind of Object."""

    results: list["Object"] = Field(default_factory=list)


# =============================================================================
# The Object envelope
# =============================================================================

_BLOCK_TAGS = tags_of(*BLOCK_TYPES)


def _object_tag(value: Any) -> Any:
    kind = read_tag(value, "object")
    if kind == "block":
        block_type = read_tag(value, "type")
        return f"block.{block_type if block_type in _BLOCK_TAGS else CATCH_ALL}"
    if kind == "user":
        user_type = read_tag(value, "type")
        return f"user.{user_type if user_type in USER_TYPES else CATCH_ALL}"
    return kind


_OBJECT_CHOICES: dict[str, Any] = {
    "database": Database,
    "page": Page,
    "list": ObjectList,
    "error": ErrorResponse,
    **{f"block.{tag}": model for tag, model in _BLOCK_TAGS.items()},
    f"block.{CATCH_ALL}": UnknownBlock,
    **{f"user.{tag}": model for tag, model in USER_TYPES.items()},
    f"user.{CATCH_ALL}": UserCommon,
}

Object = union_of(_OBJECT_CHOICES, _object_tag)
"""Any top-level document: block, database, page, list, user or error.

There is no catch-all; an unknown ``object`` value is a decode error.
"""

ObjectList.model_rebuild()

_OBJECT_ADAPTER: TypeAdapter = TypeAdapter(Object)
_BLOCK_ADAPTER: TypeAdapter = TypeAdapter(Block)


def _validate(adapter: TypeAdapter, data: Union[bytes, str, dict[str, Any]], what: str) -> Any:
    try:
        if isinstance(data, (bytes, bytearray, str)):
            return adapter.validate_json(data)
        return adapter.validate_python(data)
    except ValidationError as e:
        raise DecodeError(f"Failed to decode {what}: {e}") from e


def parse_object(data: Union[bytes, str, dict[str, Any]]) -> Any:
    """Decode a response body into an Object.

    Args:
        data: Raw JSON (bytes or str) or an already decoded dict.

    Returns:
        A Database, Page, ObjectList, ErrorResponse, block or user model.

    Raises:
        DecodeError: If the body is not JSON or matches no Object variant.
    """
    obj = _validate(_OBJECT_ADAPTER, data, "Notion object")
    logger.debug(f"Decoded {type(obj).__name__}")
    return obj


def parse_block(data: Union[bytes, str, dict[str, Any]]) -> Any:
    """Decode a single block document."""
    return _validate(_BLOCK_ADAPTER, data, "block")


__all__ = [
    "Properties",
    "Page",
    "Database",
    "ListResponse",
    "ObjectList",
    "Object",
    "parse_object",
    "parse_block",
]
