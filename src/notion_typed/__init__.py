"""Notion Typed - typed async client for the Notion API.

Module structure:
- ids: nominal identifier types (DatabaseId, PageId, BlockId...)
- models: typed documents (blocks, pages, databases, users, properties,
  rich text) and request builders for search and database queries
- client: async API facade
- errors: exception hierarchy
- builders: request-side block, rich text and property value dicts
- extract: plain text rendering of blocks
- utils: token loading and URL helpers
"""

# Identifiers
from notion_typed.ids import (
    AsIdentifier,
    BlockId,
    DatabaseId,
    Identifier,
    PageId,
    PropertyId,
    UserId,
)

# Errors
from notion_typed.errors import (
    ApiError,
    DecodeError,
    InvalidCredentialError,
    NotionError,
    TransportError,
    UnexpectedResponseError,
)

# Client
from notion_typed.client import BASE_URL, NOTION_API_VERSION, NotionApi, get_notion_client

# Core models
from notion_typed.models import (
    Block,
    Database,
    DatabaseQuery,
    FilterCondition,
    FilterSearch,
    ListResponse,
    Object,
    ObjectList,
    Page,
    PageCreateRequest,
    Paging,
    PagingCursor,
    PropertyCondition,
    QuerySearch,
    RichText,
    SearchRequest,
    SortSearch,
    User,
    parse_block,
    parse_object,
    plain_text,
)

# Extract operations
from notion_typed.extract import extract_block_text, extract_rich_text

# Utils
from notion_typed.utils import extract_page_id, get_notion_token

__all__ = [
    # Identifiers
    "AsIdentifier",
    "BlockId",
    "DatabaseId",
    "Identifier",
    "PageId",
    "PropertyId",
    "UserId",
    # Errors
    "ApiError",
    "DecodeError",
    "InvalidCredentialError",
    "NotionError",
    "TransportError",
    "UnexpectedResponseError",
    # Client
    "BASE_URL",
    "NOTION_API_VERSION",
    "NotionApi",
    "get_notion_client",
    # Models
    "Block",
    "Database",
    "DatabaseQuery",
    "FilterCondition",
    "FilterSearch",
    "ListResponse",
    "Object",
    "ObjectList",
    "Page",
    "PageCreateRequest",
    "Paging",
    "PagingCursor",
    "PropertyCondition",
    "QuerySearch",
    "RichText",
    "SearchRequest",
    "SortSearch",
    "User",
    "parse_block",
    "parse_object",
    "plain_text",
    # Extract
    "extract_block_text",
    "extract_rich_text",
    # Utils
    "extract_page_id",
    "get_notion_token",
]
