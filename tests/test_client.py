"""Tests for NotionApi against a mocked transport."""

import asyncio
import json
import logging

import httpx
import pytest

from factories import DATABASE_ID, PAGE_ID, list_of, make_block
from notion_typed import builders
from notion_typed.client import BASE_URL, NOTION_API_VERSION, NotionApi, get_notion_client
from notion_typed.errors import (
    ApiError,
    DecodeError,
    InvalidCredentialError,
    TransportError,
    UnexpectedResponseError,
)
from notion_typed.ids import BlockId, DatabaseId, PageId
from notion_typed.models.error import ErrorCode
from notion_typed.models.objects import Database, Page, parse_object
from notion_typed.models.paging import Paging, PagingCursor
from notion_typed.models.search import (
    DatabaseQuery,
    FilterSearch,
    FilterValue,
    QuerySearch,
    SearchRequest,
)
from notion_typed.models.users import BotUser, PersonUser


def respond(body, status: int = 200):
    """Handler answering every request with ``body``."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=body)

    return handler


def run(coro):
    return asyncio.run(coro)


class TestRequests:
    """Tests for what goes over the wire."""

    def test_headers_and_url(self, mock_api, fixture):
        api = mock_api(respond(fixture("page.json")))
        run(api.get_page(PageId(PAGE_ID)))

        request = api.requests[0]
        assert request.method == "GET"
        assert str(request.url) == f"{BASE_URL}/pages/{PAGE_ID}"
        assert request.headers["Authorization"] == "Bearer secret_test_token"
        assert request.headers["Notion-Version"] == NOTION_API_VERSION == "2022-06-28"

    def test_custom_base_url(self, fixture):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=fixture("database.json"))

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        api = NotionApi("t", base_url="http://localhost:8080/v1/", http_client=client)
        run(api.get_database(DatabaseId(DATABASE_ID)))
        assert str(requests[0].url) == f"http://localhost:8080/v1/databases/{DATABASE_ID}"

    def test_repr_hides_token(self, mock_api):
        api = mock_api(respond({}))
        assert "secret_test_token" not in repr(api)


class TestOperations:
    """Tests for each API operation."""

    def test_get_page_accepts_page_value(self, mock_api, fixture):
        """Entities can be passed where their id is expected."""
        api = mock_api(respond(fixture("page.json")))
        page = run(api.get_page(PageId(PAGE_ID)))
        again = run(api.get_page(page))
        assert isinstance(again, Page)
        assert api.requests[1].url.path == f"/v1/pages/{page.id}"

    def test_get_database(self, mock_api, fixture):
        api = mock_api(respond(fixture("database.json")))
        database = run(api.get_database(DatabaseId(DATABASE_ID)))
        assert isinstance(database, Database)
        assert database.title_plain_text() == "Grocery List"

    def test_get_database_rejects_page(self, mock_api, fixture):
        api = mock_api(respond(fixture("page.json")))
        with pytest.raises(UnexpectedResponseError) as excinfo:
            run(api.get_database(DatabaseId(DATABASE_ID)))
        assert isinstance(excinfo.value.response, Page)

    def test_search(self, mock_api, fixture):
        api = mock_api(respond(fixture("search_mixed.json")))
        results = run(api.search(FilterSearch(value=FilterValue.DATABASE)))

        request = api.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v1/search"
        assert json.loads(request.content) == {"filter": {"value": "database", "property": "object"}}
        assert len(results.results) == 2
        assert len(results.only_databases().results) == 1

    def test_search_with_full_request(self, mock_api):
        api = mock_api(respond(list_of()))
        run(api.search(SearchRequest(query="kale", page_size=5)))
        assert json.loads(api.requests[0].content) == {"query": "kale", "page_size": 5}

    def test_search_rejects_non_list(self, mock_api, fixture):
        api = mock_api(respond(fixture("page.json")))
        with pytest.raises(UnexpectedResponseError):
            run(api.search(QuerySearch(query="kale")))

    def test_list_databases_is_deprecated(self, mock_api, fixture):
        doc = fixture("search_mixed.json")
        doc["results"] = doc["results"][:1]
        api = mock_api(respond(doc))
        with pytest.warns(DeprecationWarning):
            databases = run(api.list_databases())
        assert api.requests[0].url.path == "/v1/databases"
        assert isinstance(databases.results[0], Database)

    def test_query_database(self, mock_api, fixture):
        api = mock_api(respond(list_of(fixture("page.json"), next_cursor="next-1")))
        pages = run(api.query_database(DatabaseId(DATABASE_ID), DatabaseQuery(page_size=1)))

        request = api.requests[0]
        assert request.url.path == f"/v1/databases/{DATABASE_ID}/query"
        assert json.loads(request.content) == {"page_size": 1}
        assert pages.results[0].title() == "Tuscan Kale"
        assert pages.next_cursor == PagingCursor("next-1")

    def test_query_database_default_body(self, mock_api, fixture):
        api = mock_api(respond(list_of()))
        database = parse_object(fixture("database.json"))
        run(api.query_database(database))
        assert json.loads(api.requests[0].content) == {}

    def test_query_database_rejects_blocks(self, mock_api):
        api = mock_api(respond(list_of(make_block("divider", {}))))
        with pytest.raises(UnexpectedResponseError):
            run(api.query_database(DatabaseId(DATABASE_ID)))

    def test_block_children(self, mock_api, fixture):
        api = mock_api(respond(fixture("block_children.json")))
        paging = Paging(start_cursor=PagingCursor("cur"), page_size=50)
        blocks = run(api.get_block_children(PageId(PAGE_ID).as_block_id(), paging))

        request = api.requests[0]
        assert request.url.path == f"/v1/blocks/{PAGE_ID}/children"
        assert dict(request.url.params) == {"start_cursor": "cur", "page_size": "50"}
        assert len(blocks.results) == 4

    def test_block_children_without_paging(self, mock_api, fixture):
        api = mock_api(respond(fixture("block_children.json")))
        run(api.get_block_children(BlockId("b1")))
        assert api.requests[0].url.query == b""

    def test_list_users(self, mock_api, fixture):
        api = mock_api(respond(fixture("users.json")))
        users = run(api.list_users())
        assert api.requests[0].url.path == "/v1/users"
        assert [type(user) for user in users.results] == [PersonUser, BotUser]
        assert users.has_more is True

    def test_create_page(self, mock_api, fixture):
        api = mock_api(respond(fixture("page.json")))
        request = builders.make_page_request(
            DatabaseId(DATABASE_ID),
            "Tuscan Kale",
            title_property="Name",
            properties={"Price": builders.number_value(2.5)},
            children=[builders.make_paragraph("Hello")],
        )
        page = run(api.create_page(request))

        sent = json.loads(api.requests[0].content)
        assert api.requests[0].method == "POST"
        assert api.requests[0].url.path == "/v1/pages"
        assert sent["parent"] == {"type": "database_id", "database_id": DATABASE_ID}
        assert sent["properties"]["Name"]["title"][0]["text"]["content"] == "Tuscan Kale"
        assert sent["properties"]["Price"] == {"number": 2.5}
        assert sent["children"][0]["type"] == "paragraph"
        assert isinstance(page, Page)


class TestFailures:
    """Tests for the error paths of a request."""

    def test_error_object_raises_api_error(self, mock_api, fixture):
        api = mock_api(respond(fixture("error.json"), status=404))
        with pytest.raises(ApiError) as excinfo:
            run(api.get_page(PageId(PAGE_ID)))
        error = excinfo.value
        assert error.code is ErrorCode.OBJECT_NOT_FOUND
        assert error.status == 404
        assert str(error).startswith("API Error object_not_found(404): Could not find page")

    def test_unknown_error_code_in_message(self, mock_api):
        """An error code added after this release is reported as sent."""
        body = {"object": "error", "status": 400, "code": "brand_new_code", "message": "Try again"}
        api = mock_api(respond(body, status=400))
        with pytest.raises(ApiError) as excinfo:
            run(api.get_page(PageId(PAGE_ID)))
        assert excinfo.value.code is ErrorCode.UNKNOWN
        assert excinfo.value.code_name == "brand_new_code"
        assert str(excinfo.value) == "API Error brand_new_code(400): Try again"

    def test_error_body_wins_over_status(self, mock_api, fixture):
        """The body decides, even when the HTTP status says success."""
        api = mock_api(respond(fixture("error.json"), status=200))
        with pytest.raises(ApiError):
            run(api.get_page(PageId(PAGE_ID)))

    def test_error_logged(self, mock_api, fixture, caplog):
        api = mock_api(respond(fixture("error.json"), status=404))
        with caplog.at_level(logging.WARNING, logger="notion_typed.client"):
            with pytest.raises(ApiError):
                run(api.get_page(PageId(PAGE_ID)))
        assert "object_not_found" in caplog.text
        assert "secret_test_token" not in caplog.text

    def test_network_failure(self, mock_api):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        api = mock_api(handler)
        with pytest.raises(TransportError) as excinfo:
            run(api.get_page(PageId(PAGE_ID)))
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    def test_malformed_base_url(self):
        """A base URL httpx cannot parse fails as a transport error."""
        client = httpx.AsyncClient(transport=httpx.MockTransport(respond({})))
        api = NotionApi("token", base_url="https://api.notion.com:99999/v1", http_client=client)
        with pytest.raises(TransportError) as excinfo:
            run(api.get_page(PageId(PAGE_ID)))
        assert isinstance(excinfo.value.__cause__, httpx.InvalidURL)

    def test_invalid_body(self, mock_api):
        api = mock_api(lambda request: httpx.Response(502, text="<html>Bad Gateway</html>"))
        with pytest.raises(DecodeError):
            run(api.get_page(PageId(PAGE_ID)))

    def test_wrong_id_kind_sends_nothing(self, mock_api):
        """An id of the wrong kind is rejected before any request."""
        api = mock_api(respond({}))
        with pytest.raises(TypeError):
            run(api.get_page(BlockId("b1")))
        with pytest.raises(TypeError):
            run(api.get_block_children("b1"))
        assert api.requests == []


class TestCredentials:
    """Tests for token validation."""

    @pytest.mark.parametrize("token", ["", "bad\ntoken", "tökén", "tab\tinside"])
    def test_invalid_token(self, token):
        with pytest.raises(InvalidCredentialError):
            NotionApi(token, http_client=httpx.AsyncClient())

    def test_from_environment(self, monkeypatch):
        monkeypatch.setattr("notion_typed.utils._env_loaded", True)
        monkeypatch.setenv("NOTION_API_TOKEN", "  secret_from_env  ")
        api = get_notion_client(http_client=httpx.AsyncClient())
        assert api._headers["Authorization"] == "Bearer secret_from_env"

    def test_missing_environment_token(self, monkeypatch):
        monkeypatch.setattr("notion_typed.utils._env_loaded", True)
        monkeypatch.delenv("NOTION_API_TOKEN", raising=False)
        with pytest.raises(ValueError, match="NOTION_API_TOKEN"):
            get_notion_client()


class TestLifecycle:
    """Tests for closing the transport."""

    def test_closes_owned_client(self):
        async def scenario():
            async with NotionApi("token") as api:
                client = api._client
            return client

        assert run(scenario()).is_closed

    def test_leaves_caller_client_open(self):
        client = httpx.AsyncClient()

        async def scenario():
            async with NotionApi("token", http_client=client):
                pass
            closed = client.is_closed
            await client.aclose()
            return closed

        assert run(scenario()) is False
