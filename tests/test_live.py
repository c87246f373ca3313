"""Live tests against real Notion API.

These tests make actual API calls using NOTION_API_TOKEN from .env. The
page tests also need TEST_PAGE_ID: a page shared with the integration under
which a test page is created. Created pages remain for manual inspection.

Skip if NOTION_API_TOKEN not available.
"""

import asyncio
import os

import pytest

from notion_typed import NotionApi, PageId, builders
from notion_typed.extract import extract_block_text
from notion_typed.models.objects import Database, Page
from notion_typed.models.paging import Paging
from notion_typed.models.search import DatabaseQuery, FilterSearch, FilterValue, QuerySearch
from notion_typed.models.users import UserCommon


@pytest.fixture(scope="module")
def test_page_id():
    parent_id = os.getenv("TEST_PAGE_ID")
    if not parent_id:
        pytest.skip("TEST_PAGE_ID not set - skipping live page tests")
    return PageId(parent_id)


def run_with_api(token, action):
    async def scenario():
        async with NotionApi(token) as api:
            return await action(api)

    return asyncio.run(scenario())


def test_1_search_databases(live_api):
    """Database search narrows cleanly to databases."""

    async def action(api):
        return (await api.search(FilterSearch(value=FilterValue.DATABASE))).only_databases()

    databases = run_with_api(live_api, action)
    assert all(isinstance(db, Database) for db in databases.results)


def test_2_list_users(live_api):
    async def action(api):
        return await api.list_users(Paging(page_size=10))

    users = run_with_api(live_api, action)
    assert len(users.results) <= 10
    assert all(isinstance(user, UserCommon) for user in users.results)


def test_3_query_first_database(live_api):
    """Query the first shared database, if any."""

    async def action(api):
        databases = (await api.search(FilterSearch(value=FilterValue.DATABASE))).only_databases()
        if not databases.results:
            return None
        return await api.query_database(databases.results[0], DatabaseQuery(page_size=5))

    pages = run_with_api(live_api, action)
    if pages is None:
        pytest.skip("No database shared with the integration")
    assert all(isinstance(page, Page) for page in pages.results)


def test_4_create_and_read_page(live_api, test_page_id):
    """Create a page with content and read it back."""
    request = builders.make_page_request(
        test_page_id,
        "Live test page (auto-generated)",
        children=[
            builders.make_heading(2, "Heading"),
            builders.make_paragraph("Hello from notion_typed"),
            builders.make_to_do("Check me", checked=True),
            builders.make_divider(),
        ],
    )

    async def action(api):
        page = await api.create_page(request)
        fetched = await api.get_page(page)
        children = await api.get_block_children(page.id.as_block_id())
        return page, fetched, children

    page, fetched, children = run_with_api(live_api, action)
    assert fetched.id == page.id
    assert fetched.title() == "Live test page (auto-generated)"
    assert [extract_block_text(block) for block in children.results] == [
        "Heading",
        "Hello from notion_typed",
        "[x] Check me",
        "---",
    ]


def test_5_search_by_title(live_api):
    async def action(api):
        return await api.search(QuerySearch(query="Live test page"))

    results = run_with_api(live_api, action)
    assert all(isinstance(item, (Page, Database)) for item in results.results)
