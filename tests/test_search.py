"""Tests for search requests and database query filters."""

from datetime import date, datetime, timezone

from notion_typed.ids import PageId, UserId
from notion_typed.models.paging import Paging, PagingCursor
from notion_typed.models.search import (
    AndCondition,
    CheckboxCondition,
    DatabaseQuery,
    DatabaseSort,
    DateCondition,
    FilesCondition,
    FilterCondition,
    FilterSearch,
    FilterValue,
    FormulaCondition,
    MultiSelectCondition,
    NumberCondition,
    OrCondition,
    PeopleCondition,
    PropertyCondition,
    QuerySearch,
    RelationCondition,
    SearchRequest,
    SelectCondition,
    SortDirection,
    SortSearch,
    SortTimestamp,
    TextCondition,
    TimestampCondition,
)


class TestSearchRequest:
    """Tests for the /search body."""

    def test_filter_search(self):
        request = FilterSearch(value=FilterValue.DATABASE).to_search_request()
        assert request.to_dict() == {"filter": {"value": "database", "property": "object"}}

    def test_query_search(self):
        assert QuerySearch(query="Grocery").to_search_request().to_dict() == {"query": "Grocery"}

    def test_sort_search(self):
        request = SortSearch(direction=SortDirection.DESCENDING).to_search_request()
        assert request.to_dict() == {"sort": {"direction": "descending", "timestamp": "last_edited_time"}}

    def test_paging_fields(self):
        request = SearchRequest(query="x", start_cursor=PagingCursor("abc"), page_size=10)
        assert request.to_dict() == {"query": "x", "start_cursor": "abc", "page_size": 10}

    def test_empty_request(self):
        """Nothing set means an empty body, which searches everything."""
        assert SearchRequest().to_dict() == {}


class TestPaging:
    def test_params(self):
        assert Paging(start_cursor=PagingCursor("c1"), page_size=50).to_params() == {
            "start_cursor": "c1",
            "page_size": 50,
        }

    def test_params_empty(self):
        assert Paging().to_params() == {}


class TestConditions:
    """Tests for the serialized form of single conditions."""

    def test_property_filter(self):
        """A property filter sits flat next to the property name."""
        condition = FilterCondition("Name", PropertyCondition.text(TextCondition.contains("First")))
        assert condition.model_dump() == {"property": "Name", "text": {"contains": "First"}}

    def test_operand_free_operators_send_true(self):
        condition = FilterCondition("Notes", PropertyCondition.rich_text(TextCondition.is_empty()))
        assert condition.model_dump() == {"property": "Notes", "rich_text": {"is_empty": True}}

    def test_files_condition(self):
        condition = FilterCondition("Photo", PropertyCondition.files(FilesCondition.is_not_empty()))
        assert condition.model_dump() == {"property": "Photo", "files": {"is_not_empty": True}}

    def test_number(self):
        condition = PropertyCondition.number(NumberCondition.greater_than_or_equal_to(2.5))
        assert condition.model_dump() == {"number": {"greater_than_or_equal_to": 2.5}}

    def test_select_and_multi_select(self):
        assert PropertyCondition.select(SelectCondition.equals("Fruit")).model_dump() == {
            "select": {"equals": "Fruit"}
        }
        assert PropertyCondition.multi_select(MultiSelectCondition.does_not_contain("Rainbow")).model_dump() == {
            "multi_select": {"does_not_contain": "Rainbow"}
        }

    def test_date_operands_are_iso_strings(self):
        assert DateCondition.on_or_after(date(2022, 4, 16)).model_dump() == {"on_or_after": "2022-04-16"}
        moment = datetime(2022, 4, 16, 9, 30, tzinfo=timezone.utc)
        assert DateCondition.before(moment).model_dump() == {"before": "2022-04-16T09:30:00+00:00"}

    def test_relative_dates_send_empty_object(self):
        assert DateCondition.past_week().model_dump() == {"past_week": {}}
        assert DateCondition.next_year().model_dump() == {"next_year": {}}

    def test_ids_are_sent_as_strings(self):
        people = PropertyCondition.people(PeopleCondition.contains(UserId("u1")))
        relation = PropertyCondition.relation(RelationCondition.contains(PageId("p1")))
        assert people.model_dump() == {"people": {"contains": "u1"}}
        assert relation.model_dump() == {"relation": {"contains": "p1"}}

    def test_formula_nests_result_condition(self):
        condition = PropertyCondition.formula(FormulaCondition.number(NumberCondition.less_than(10)))
        assert condition.model_dump() == {"formula": {"number": {"less_than": 10}}}

    def test_timestamp_condition(self):
        condition = TimestampCondition.last_edited_time(DateCondition.past_month())
        assert condition.model_dump() == {"timestamp": "last_edited_time", "last_edited_time": {"past_month": {}}}


class TestDatabaseQuery:
    """Tests for the /databases/{id}/query body."""

    def test_empty_query(self):
        assert DatabaseQuery().to_dict() == {}

    def test_compound_filter(self):
        """And/Or nodes nest arbitrarily."""
        query = DatabaseQuery(
            filter=AndCondition(
                [
                    FilterCondition("In stock", PropertyCondition.checkbox(CheckboxCondition.equals(True))),
                    OrCondition(
                        [
                            FilterCondition("Price", PropertyCondition.number(NumberCondition.less_than(5))),
                            TimestampCondition.created_time(DateCondition.after(date(2022, 1, 1))),
                        ]
                    ),
                ]
            )
        )
        assert query.to_dict() == {
            "filter": {
                "and": [
                    {"property": "In stock", "checkbox": {"equals": True}},
                    {
                        "or": [
                            {"property": "Price", "number": {"less_than": 5}},
                            {"timestamp": "created_time", "created_time": {"after": "2022-01-01"}},
                        ]
                    },
                ]
            }
        }

    def test_sorts_and_paging(self):
        query = DatabaseQuery(
            sorts=[
                DatabaseSort.by_property("Price", SortDirection.DESCENDING),
                DatabaseSort.by_timestamp(SortTimestamp.CREATED_TIME),
            ],
            page_size=25,
        )
        assert query.to_dict() == {
            "sorts": [
                {"property": "Price", "direction": "descending"},
                {"timestamp": "created_time", "direction": "ascending"},
            ],
            "page_size": 25,
        }

    def test_single_filter(self):
        query = DatabaseQuery(filter=FilterCondition("Name", PropertyCondition.title(TextCondition.equals("Kale"))))
        assert query.to_dict() == {"filter": {"property": "Name", "title": {"equals": "Kale"}}}
