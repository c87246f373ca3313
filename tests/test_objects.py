"""Tests for the Object envelope, pages, databases and list narrowing."""

import json

import pytest

from factories import DATABASE_ID, make_block, list_of
from notion_typed.errors import DecodeError, UnexpectedResponseError
from notion_typed.ids import BlockId, DatabaseId, PageId, UserId
from notion_typed.models.blocks import Heading2Block, ParagraphBlock, ToDoBlock, UnknownBlock
from notion_typed.models.error import ErrorCode, ErrorResponse
from notion_typed.models.files import EmojiIcon, ExternalFileObject
from notion_typed.models.objects import (
    Database,
    ObjectList,
    Page,
    parse_object,
)
from notion_typed.models.paging import PagingCursor
from notion_typed.models.parents import DatabaseParent, UnknownParent, WorkspaceParent
from notion_typed.models.users import BotUser, PersonUser, UserCommon, UserOwner, WorkspaceOwner


class TestPage:
    """Tests for page documents."""

    def test_decode(self, fixture):
        page = parse_object(fixture("page.json"))
        assert isinstance(page, Page)
        assert page.id == PageId("b55c9c91-384d-452b-81db-d1ef79372b75")
        assert page.as_id() == page.id
        assert isinstance(page.icon, EmojiIcon)
        assert page.cover is None

    def test_parent(self, fixture):
        page = parse_object(fixture("page.json"))
        assert isinstance(page.parent, DatabaseParent)
        assert page.parent.database_id == DatabaseId(DATABASE_ID)

    def test_unknown_parent_kind(self, fixture):
        """A parent kind added later does not break the page."""
        doc = fixture("page.json")
        doc["parent"] = {"type": "data_source_id", "data_source_id": "ds1"}
        page = parse_object(doc)
        assert isinstance(page.parent, UnknownParent)
        assert page.to_dict()["parent"] == {"type": "data_source_id", "data_source_id": "ds1"}

    def test_title(self, fixture):
        """The title is read from whichever property has the title type."""
        page = parse_object(fixture("page.json"))
        assert page.title() == "Tuscan Kale"

    def test_page_without_title(self, fixture):
        doc = fixture("page.json")
        doc["properties"] = {}
        assert parse_object(doc).title() is None

    def test_roundtrip(self, fixture):
        page = parse_object(fixture("page.json"))
        assert parse_object(page.to_dict()) == page


class TestDatabase:
    """Tests for database documents."""

    def test_decode(self, fixture):
        database = parse_object(fixture("database.json"))
        assert isinstance(database, Database)
        assert database.as_id() == DatabaseId(DATABASE_ID)
        assert database.title_plain_text() == "Grocery List"
        assert database.is_inline is False
        assert isinstance(database.cover, ExternalFileObject)

    def test_workspace_parent(self, fixture):
        database = parse_object(fixture("search_mixed.json")).results[0]
        assert isinstance(database.parent, WorkspaceParent)

    def test_roundtrip(self, fixture):
        database = parse_object(fixture("database.json"))
        assert parse_object(database.to_dict()) == database


class TestObjectList:
    """Tests for list responses and narrowing."""

    def test_mixed_results(self, fixture):
        """A search list keeps pages and databases in order."""
        results = parse_object(fixture("search_mixed.json"))
        assert isinstance(results, ObjectList)
        assert [type(item) for item in results.results] == [Database, Page]
        assert results.has_more is True
        assert results.next_cursor == PagingCursor("e7e4c1f0-5a2b-4f1e-9c3d-8b7a6f5e4d3c")

    def test_only_databases_drops_others(self, fixture):
        """Filtering keeps the cursor even though a result was dropped."""
        results = parse_object(fixture("search_mixed.json"))
        databases = results.only_databases()
        assert len(databases.results) == 1
        assert databases.results[0].title_plain_text() == "Grocery List"
        assert databases.has_more is True
        assert databases.next_cursor == results.next_cursor

    def test_expect_databases_rejects_page(self, fixture):
        """Strict narrowing reports the offending object."""
        results = parse_object(fixture("search_mixed.json"))
        with pytest.raises(UnexpectedResponseError) as excinfo:
            results.expect_databases()
        assert isinstance(excinfo.value.response, Page)
        assert "'page'" in str(excinfo.value)

    def test_expect_on_empty_list(self):
        """An empty list narrows to any element type."""
        results = parse_object(list_of())
        assert results.expect_pages().results == []
        assert results.expect_databases().results == []
        assert results.only_databases().results == []

    def test_users(self, fixture):
        users = parse_object(fixture("users.json")).expect_users()
        person, bot = users.results
        assert isinstance(person, PersonUser)
        assert person.person.email == "john.doe@example.com"
        assert isinstance(bot, BotUser)
        assert isinstance(bot.bot.owner, WorkspaceOwner)
        assert bot.bot.workspace_name == "Acme"
        assert bot.as_id() == UserId("9188c6a5-7381-452f-b3dc-d4865aa89bdf")
        assert users.next_cursor == PagingCursor("fe2cc560-036c-44cd-90e8-294d5a74cebc")

    def test_bot_owned_by_user(self):
        bot = {
            "object": "user",
            "id": "bot-1",
            "type": "bot",
            "bot": {"owner": {"type": "user", "user": {"object": "user", "id": "owner-1"}}},
        }
        user = parse_object(list_of(bot)).expect_users().results[0]
        assert isinstance(user.bot.owner, UserOwner)
        assert user.bot.owner.user.id == UserId("owner-1")

    def test_bot_without_details(self):
        """Bots other than the caller come with an empty ``bot`` object."""
        user = parse_object({"object": "user", "id": "bot-2", "type": "bot", "bot": {}})
        assert isinstance(user, BotUser)
        assert user.bot.owner is None

    def test_partial_user(self):
        """A user without a type decodes as the common fields only."""
        user = parse_object({"object": "user", "id": "partial"})
        assert type(user) is UserCommon
        assert user.name is None

    def test_block_children(self, fixture):
        blocks = parse_object(fixture("block_children.json")).expect_blocks()
        assert [type(block) for block in blocks.results] == [Heading2Block, ParagraphBlock, ToDoBlock, UnknownBlock]
        assert blocks.results[0].as_id() == BlockId("c02fc1d3-db8b-45c5-a222-27595b15aea7")
        assert blocks.has_more is False
        assert blocks.next_cursor is None

    def test_blocks_are_not_pages(self, fixture):
        results = parse_object(fixture("block_children.json"))
        with pytest.raises(UnexpectedResponseError) as excinfo:
            results.expect_pages()
        assert isinstance(excinfo.value.response, Heading2Block)

    def test_nested_lists(self):
        """A list may itself contain lists."""
        results = parse_object(list_of(list_of(), list_of(make_block("divider", {}))))
        assert all(isinstance(item, ObjectList) for item in results.results)
        assert len(results.results[1].results) == 1

    def test_single_block_object(self):
        block = parse_object(make_block("to_do", {"rich_text": [], "checked": False}))
        assert isinstance(block, ToDoBlock)


class TestErrors:
    """Tests for error documents and decode failures."""

    def test_error_object(self, fixture):
        error = parse_object(fixture("error.json"))
        assert isinstance(error, ErrorResponse)
        assert error.status == 404
        assert error.code is ErrorCode.OBJECT_NOT_FOUND
        assert error.request_id == "a1b2c3d4"

    def test_unknown_error_code(self):
        """Codes this release does not know still decode."""
        error = parse_object({"object": "error", "status": 418, "code": "teapot", "message": "short and stout"})
        assert error.code is ErrorCode.UNKNOWN

    def test_unknown_error_code_is_kept(self):
        """The server's code string survives decoding and re-encoding."""
        error = parse_object({"object": "error", "status": 400, "code": "brand_new_code", "message": "m"})
        assert error.code_name == "brand_new_code"
        assert error.to_dict() == {"object": "error", "status": 400, "code": "brand_new_code", "message": "m"}
        assert parse_object(error.to_dict()) == error

    def test_known_error_code_serializes_unchanged(self, fixture):
        error = parse_object(fixture("error.json"))
        assert error.code_name == "object_not_found"
        assert error.to_dict() == fixture("error.json")

    def test_bytes_input(self, fixture):
        raw = json.dumps(fixture("error.json")).encode("utf-8")
        assert isinstance(parse_object(raw), ErrorResponse)

    def test_unknown_object_kind(self):
        """There is no catch-all at the top level."""
        with pytest.raises(DecodeError):
            parse_object({"object": "comment", "id": "c1"})

    def test_missing_object_kind(self):
        with pytest.raises(DecodeError):
            parse_object({"id": "c1"})

    def test_invalid_json(self):
        with pytest.raises(DecodeError, match="Failed to decode"):
            parse_object(b"<html>Bad Gateway</html>")

    def test_page_missing_required_field(self, fixture):
        doc = fixture("page.json")
        del doc["parent"]
        with pytest.raises(DecodeError):
            parse_object(doc)
