"""Notion API client - async facade over the REST endpoints."""

import logging
import warnings
from typing import Any

import httpx

from notion_typed.errors import ApiError, InvalidCredentialError, TransportError, UnexpectedResponseError
from notion_typed.ids import AsIdentifier, BlockId, DatabaseId, PageId, require_id
from notion_typed.models.base import NotionModel
from notion_typed.models.blocks import Block
from notion_typed.models.error import ErrorResponse
from notion_typed.models.objects import Database, ListResponse, ObjectList, Page, parse_object
from notion_typed.models.paging import Paging
from notion_typed.models.requests import PageCreateRequest
from notion_typed.models.search import DatabaseQuery, NotionSearch, SearchRequest
from notion_typed.models.users import User
from notion_typed.utils import get_notion_token

logger = logging.getLogger(__name__)

NOTION_API_VERSION = "2022-06-28"
BASE_URL = "https://api.notion.com/v1"
DEFAULT_TIMEOUT = 30.0


def _auth_headers(api_token: str) -> dict[str, str]:
    """Build the fixed header set sent with every request.

    Raises:
        InvalidCredentialError: If the token cannot be sent as a header value.
    """
    if not isinstance(api_token, str) or not api_token:
        raise InvalidCredentialError("API token must be a non-empty string")
    if not api_token.isascii() or any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in api_token):
        raise InvalidCredentialError("API token contains characters that are not valid in an HTTP header")
    return {
        "Notion-Version": NOTION_API_VERSION,
        "Authorization": f"Bearer {api_token}",
    }


def _expect_list(obj: Any) -> ObjectList:
    if not isinstance(obj, ObjectList):
        raise UnexpectedResponseError(obj)
    return obj


class NotionApi:
    """Async client for the Notion API.

    Every call is a single request. Responses are decoded into typed models;
    error objects are raised as ApiError and any response of the wrong kind
    as UnexpectedResponseError. Nothing is retried or cached.

    The client can be shared between concurrent tasks. Cancelling a task
    abandons its request; a ``create_page`` that already reached the server
    is not rolled back.

    Example:
        >>> async with NotionApi(token) as api:
        ...     databases = (await api.search(FilterSearch(value=FilterValue.DATABASE))).only_databases()
    """

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            api_token: Integration token, sent as a bearer token.
            base_url: API root, without trailing slash.
            timeout: Request timeout in seconds, for the owned transport.
            http_client: Optional caller-owned httpx.AsyncClient. It is used
                as is and not closed by ``aclose()``.

        Raises:
            InvalidCredentialError: If the token is not a valid header value.
        """
        self._headers = _auth_headers(api_token)
        self.base_url = base_url.rstrip("/")
        if http_client is None:
            self._client = httpx.AsyncClient(timeout=timeout)
            self._owns_client = True
        else:
            self._client = http_client
            self._owns_client = False

    def __repr__(self) -> str:
        return f"NotionApi(base_url={self.base_url!r})"

    async def __aenter__(self) -> "NotionApi":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    # =========================================================================
    # Request primitives
    # =========================================================================

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"{method} {url}")
        try:
            response = await self._client.request(method, url, headers=self._headers, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        logger.debug(f"{method} {url} -> {response.status_code}")

        obj = parse_object(response.content)
        if isinstance(obj, ErrorResponse):
            logger.warning(f"API error on {method} {url}: {obj.code_name} ({obj.status}) {obj.message}")
            raise ApiError(obj)
        return obj

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``path`` and decode the response into an Object.

        Args:
            path: Path relative to the base URL, e.g. ``"pages/<id>"``.
            params: Optional query string parameters.

        Raises:
            TransportError: On network failure.
            DecodeError: If the body is not a valid Object.
            ApiError: If the API returned an error object.
        """
        return await self._request("GET", path, params=params or None)

    async def post(self, path: str, body: NotionModel | dict[str, Any]) -> Any:
        """POST a JSON body to ``path`` and decode the response into an Object."""
        payload = body.to_dict() if isinstance(body, NotionModel) else body
        return await self._request("POST", path, json=payload)

    # =========================================================================
    # Operations
    # =========================================================================

    async def list_databases(self) -> ListResponse[Database]:
        """List databases shared with the integration.

        Deprecated by Notion in favour of ``search`` with a database filter.
        """
        warnings.warn(
            "list_databases is deprecated by the Notion API; use search() with a database filter",
            DeprecationWarning,
            stacklevel=2,
        )
        return _expect_list(await self.get("databases")).expect_databases()

    async def search(self, query: NotionSearch | SearchRequest) -> ObjectList:
        """Search pages and databases shared with the integration.

        Args:
            query: A NotionSearch variant or a full SearchRequest.

        Returns:
            A list of mixed pages and databases; narrow it with
            ``only_databases()`` or the ``expect_*`` methods.
        """
        request = query if isinstance(query, SearchRequest) else query.to_search_request()
        return _expect_list(await self.post("search", request))

    async def get_database(self, database_id: AsIdentifier[DatabaseId]) -> Database:
        """Retrieve a database by id (or from a Database value)."""
        database_id = require_id(database_id, DatabaseId)
        result = await self.get(f"databases/{database_id}")
        if not isinstance(result, Database):
            raise UnexpectedResponseError(result)
        return result

    async def get_page(self, page_id: AsIdentifier[PageId]) -> Page:
        """Retrieve a page by id (or from a Page value)."""
        page_id = require_id(page_id, PageId)
        result = await self.get(f"pages/{page_id}")
        if not isinstance(result, Page):
            raise UnexpectedResponseError(result)
        return result

    async def create_page(self, page: PageCreateRequest) -> Page:
        """Create a page and return it as stored by Notion."""
        result = await self.post("pages", page)
        if not isinstance(result, Page):
            raise UnexpectedResponseError(result)
        logger.info(f"Created page {result.id}")
        return result

    async def query_database(
        self,
        database: AsIdentifier[DatabaseId],
        query: DatabaseQuery | None = None,
    ) -> ListResponse[Page]:
        """Query the pages of a database.

        Args:
            database: The database id or Database value.
            query: Filter, sorts and paging. Defaults to all pages, first page.

        Returns:
            One page of results; follow ``next_cursor`` for more.
        """
        database_id = require_id(database, DatabaseId)
        result = await self.post(f"databases/{database_id}/query", query or DatabaseQuery())
        return _expect_list(result).expect_pages()

    async def get_block_children(
        self,
        block_id: AsIdentifier[BlockId],
        paging: Paging | None = None,
    ) -> ListResponse[Block]:
        """List the direct children of a block.

        Pass ``page_id.as_block_id()`` to read the content of a page.
        """
        block_id = require_id(block_id, BlockId)
        params = paging.to_params() if paging else None
        result = await self.get(f"blocks/{block_id}/children", params=params)
        return _expect_list(result).expect_blocks()

    async def list_users(self, paging: Paging | None = None) -> ListResponse[User]:
        """List the users of the workspace."""
        params = paging.to_params() if paging else None
        return _expect_list(await self.get("users", params=params)).expect_users()


def get_notion_client(**kwargs: Any) -> NotionApi:
    """Factory function to create a NotionApi from the environment.

    Reads NOTION_API_TOKEN (loading the nearest .env file) and passes any
    keyword arguments on to NotionApi.

    Returns:
        A configured NotionApi instance.

    Raises:
        ValueError: If NOTION_API_TOKEN is not set.
        InvalidCredentialError: If the token is not a valid header value.
    """
    token = get_notion_token()
    return NotionApi(token, **kwargs)
