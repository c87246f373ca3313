"""Search and database query requests.

Two request shapes are built here:

* ``POST /search`` takes a SearchRequest: a free text query, a sort on the
  last edit time, or a filter on the object kind. NotionSearch offers one
  convenience variant for each.
* ``POST /databases/{id}/query`` takes a DatabaseQuery with a filter tree
  and sorts. Filters are built from per-type conditions::

      FilterCondition("Name", PropertyCondition.text(TextCondition.contains("First")))

  serializes to ``{"property": "Name", "text": {"contains": "First"}}``.

Filters are not checked against the database schema; the server reports
mismatches as API errors.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, model_serializer

from notion_typed.ids import Identifier, PageId, UserId
from notion_typed.models.base import NotionModel
from notion_typed.models.paging import Paging


def _wire(value: Any) -> Any:
    """Convert a condition operand to its JSON form."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Identifier):
        return value.value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _wire(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_wire(item) for item in value]
    return value


# =============================================================================
# Search
# =============================================================================


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortTimestamp(str, Enum):
    LAST_EDITED_TIME = "last_edited_time"
    CREATED_TIME = "created_time"


class FilterValue(str, Enum):
    PAGE = "page"
    DATABASE = "database"


class FilterProperty(str, Enum):
    OBJECT = "object"


class Sort(NotionModel):
    direction: SortDirection
    timestamp: SortTimestamp = SortTimestamp.LAST_EDITED_TIME


class SearchFilter(NotionModel):
    value: FilterValue
    property: FilterProperty = FilterProperty.OBJECT


class SearchRequest(Paging):
    """Body of ``POST /search``; unset fields are left out of the request."""

    query: str | None = None
    sort: Optional[Sort] = None
    filter: Optional[SearchFilter] = None


class QuerySearch(NotionModel):
    """Search page and database titles for ``query``."""

    query: str

    def to_search_request(self) -> SearchRequest:
        return SearchRequest(query=self.query)


class SortSearch(NotionModel):
    direction: SortDirection
    timestamp: SortTimestamp = SortTimestamp.LAST_EDITED_TIME

    def to_search_request(self) -> SearchRequest:
        return SearchRequest(sort=Sort(direction=self.direction, timestamp=self.timestamp))


class FilterSearch(NotionModel):
    """Restrict search results to pages or to databases."""

    value: FilterValue
    property: FilterProperty = FilterProperty.OBJECT

    def to_search_request(self) -> SearchRequest:
        return SearchRequest(filter=SearchFilter(value=self.value, property=self.property))


NotionSearch = Union[QuerySearch, SortSearch, FilterSearch]


# =============================================================================
# Conditions
# =============================================================================


class Condition(NotionModel):
    """A single ``{operator: operand}`` test on a property value.

    Build conditions with the named constructors of the subclasses rather
    than directly, e.g. ``TextCondition.contains("x")``. Operators without an
    operand (``is_empty``...) send ``true``.
    """

    operator: str
    operand: Any = True

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {self.operator: _wire(self.operand)}

    @classmethod
    def _op(cls, operator: str, operand: Any = True):
        return cls(operator=operator, operand=operand)

    @classmethod
    def is_empty(cls):
        return cls._op("is_empty")

    @classmethod
    def is_not_empty(cls):
        return cls._op("is_not_empty")


class TextCondition(Condition):
    @classmethod
    def equals(cls, value: str):
        return cls._op("equals", value)

    @classmethod
    def does_not_equal(cls, value: str):
        return cls._op("does_not_equal", value)

    @classmethod
    def contains(cls, value: str):
        return cls._op("contains", value)

    @classmethod
    def does_not_contain(cls, value: str):
        return cls._op("does_not_contain", value)

    @classmethod
    def starts_with(cls, value: str):
        return cls._op("starts_with", value)

    @classmethod
    def ends_with(cls, value: str):
        return cls._op("ends_with", value)


class NumberCondition(Condition):
    @classmethod
    def equals(cls, value: int | float):
        return cls._op("equals", value)

    @classmethod
    def does_not_equal(cls, value: int | float):
        return cls._op("does_not_equal", value)

    @classmethod
    def greater_than(cls, value: int | float):
        return cls._op("greater_than", value)

    @classmethod
    def less_than(cls, value: int | float):
        return cls._op("less_than", value)

    @classmethod
    def greater_than_or_equal_to(cls, value: int | float):
        return cls._op("greater_than_or_equal_to", value)

    @classmethod
    def less_than_or_equal_to(cls, value: int | float):
        return cls._op("less_than_or_equal_to", value)


class CheckboxCondition(Condition):
    @classmethod
    def equals(cls, value: bool):
        return cls._op("equals", value)

    @classmethod
    def does_not_equal(cls, value: bool):
        return cls._op("does_not_equal", value)


class SelectCondition(Condition):
    @classmethod
    def equals(cls, option: str):
        return cls._op("equals", option)

    @classmethod
    def does_not_equal(cls, option: str):
        return cls._op("does_not_equal", option)


class StatusCondition(SelectCondition):
    pass


class MultiSelectCondition(Condition):
    @classmethod
    def contains(cls, option: str):
        return cls._op("contains", option)

    @classmethod
    def does_not_contain(cls, option: str):
        return cls._op("does_not_contain", option)


class DateCondition(Condition):
    """Date tests; operands are dates or timestamps.

    The relative operators (``past_week``...) take an empty object.
    """

    @classmethod
    def equals(cls, value: date | datetime):
        return cls._op("equals", value)

    @classmethod
    def before(cls, value: date | datetime):
        return cls._op("before", value)

    @classmethod
    def after(cls, value: date | datetime):
        return cls._op("after", value)

    @classmethod
    def on_or_before(cls, value: date | datetime):
        return cls._op("on_or_before", value)

    @classmethod
    def on_or_after(cls, value: date | datetime):
        return cls._op("on_or_after", value)

    @classmethod
    def past_week(cls):
        return cls._op("past_week", {})

    @classmethod
    def past_month(cls):
        return cls._op("past_month", {})

    @classmethod
    def past_year(cls):
        return cls._op("past_year", {})

    @classmethod
    def next_week(cls):
        return cls._op("next_week", {})

    @classmethod
    def next_month(cls):
        return cls._op("next_month", {})

    @classmethod
    def next_year(cls):
        return cls._op("next_year", {})


class PeopleCondition(Condition):
    @classmethod
    def contains(cls, user: UserId):
        return cls._op("contains", user)

    @classmethod
    def does_not_contain(cls, user: UserId):
        return cls._op("does_not_contain", user)


class FilesCondition(Condition):
    pass


class RelationCondition(Condition):
    @classmethod
    def contains(cls, page: PageId):
        return cls._op("contains", page)

    @classmethod
    def does_not_contain(cls, page: PageId):
        return cls._op("does_not_contain", page)


class FormulaCondition(Condition):
    """Test on the result of a formula, keyed by the result type."""

    @classmethod
    def string(cls, condition: TextCondition):
        return cls._op("string", condition)

    @classmethod
    def checkbox(cls, condition: CheckboxCondition):
        return cls._op("checkbox", condition)

    @classmethod
    def number(cls, condition: NumberCondition):
        return cls._op("number", condition)

    @classmethod
    def date(cls, condition: DateCondition):
        return cls._op("date", condition)


# =============================================================================
# Filters
# =============================================================================


class PropertyCondition(NotionModel):
    """A condition tagged with the property type it applies to."""

    type: str
    condition: Condition

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {self.type: _wire(self.condition)}

    @classmethod
    def text(cls, condition: TextCondition):
        return cls(type="text", condition=condition)

    @classmethod
    def rich_text(cls, condition: TextCondition):
        return cls(type="rich_text", condition=condition)

    @classmethod
    def title(cls, condition: TextCondition):
        return cls(type="title", condition=condition)

    @classmethod
    def url(cls, condition: TextCondition):
        return cls(type="url", condition=condition)

    @classmethod
    def email(cls, condition: TextCondition):
        return cls(type="email", condition=condition)

    @classmethod
    def phone_number(cls, condition: TextCondition):
        return cls(type="phone_number", condition=condition)

    @classmethod
    def number(cls, condition: NumberCondition):
        return cls(type="number", condition=condition)

    @classmethod
    def checkbox(cls, condition: CheckboxCondition):
        return cls(type="checkbox", condition=condition)

    @classmethod
    def select(cls, condition: SelectCondition):
        return cls(type="select", condition=condition)

    @classmethod
    def multi_select(cls, condition: MultiSelectCondition):
        return cls(type="multi_select", condition=condition)

    @classmethod
    def status(cls, condition: StatusCondition):
        return cls(type="status", condition=condition)

    @classmethod
    def date(cls, condition: DateCondition):
        return cls(type="date", condition=condition)

    @classmethod
    def created_time(cls, condition: DateCondition):
        return cls(type="created_time", condition=condition)

    @classmethod
    def last_edited_time(cls, condition: DateCondition):
        return cls(type="last_edited_time", condition=condition)

    @classmethod
    def people(cls, condition: PeopleCondition):
        return cls(type="people", condition=condition)

    @classmethod
    def created_by(cls, condition: PeopleCondition):
        return cls(type="created_by", condition=condition)

    @classmethod
    def last_edited_by(cls, condition: PeopleCondition):
        return cls(type="last_edited_by", condition=condition)

    @classmethod
    def files(cls, condition: FilesCondition):
        return cls(type="files", condition=condition)

    @classmethod
    def relation(cls, condition: RelationCondition):
        return cls(type="relation", condition=condition)

    @classmethod
    def formula(cls, condition: FormulaCondition):
        return cls(type="formula", condition=condition)


class FilterCondition(NotionModel):
    """Filter on one named property; serialized flat next to ``property``."""

    property: str
    condition: PropertyCondition

    def __init__(self, property: str, condition: PropertyCondition, **data: Any):
        super().__init__(property=property, condition=condition, **data)

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"property": self.property, **_wire(self.condition)}


class TimestampCondition(NotionModel):
    """Filter on the page's own created or last edited time."""

    timestamp: Literal["created_time", "last_edited_time"]
    condition: DateCondition

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp, self.timestamp: _wire(self.condition)}

    @classmethod
    def created_time(cls, condition: DateCondition) -> "TimestampCondition":
        return cls(timestamp="created_time", condition=condition)

    @classmethod
    def last_edited_time(cls, condition: DateCondition) -> "TimestampCondition":
        return cls(timestamp="last_edited_time", condition=condition)


class AndCondition(NotionModel):
    """Matches when every sub-filter matches."""

    conditions: list["QueryFilter"] = Field(default_factory=list)

    def __init__(self, conditions: Any = (), **data: Any):
        super().__init__(conditions=list(conditions), **data)

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"and": [_wire(condition) for condition in self.conditions]}


class OrCondition(NotionModel):
    """Matches when any sub-filter matches."""

    conditions: list["QueryFilter"] = Field(default_factory=list)

    def __init__(self, conditions: Any = (), **data: Any):
        super().__init__(conditions=list(conditions), **data)

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"or": [_wire(condition) for condition in self.conditions]}


QueryFilter = Union[FilterCondition, TimestampCondition, AndCondition, OrCondition]
"""A node of a database query filter tree."""

AndCondition.model_rebuild()
OrCondition.model_rebuild()


class DatabaseSort(NotionModel):
    """Sort by a property or by a timestamp; set exactly one of the two."""

    property: str | None = None
    timestamp: SortTimestamp | None = None
    direction: SortDirection = SortDirection.ASCENDING

    @classmethod
    def by_property(cls, name: str, direction: SortDirection = SortDirection.ASCENDING) -> "DatabaseSort":
        return cls(property=name, direction=direction)

    @classmethod
    def by_timestamp(cls, timestamp: SortTimestamp, direction: SortDirection = SortDirection.ASCENDING) -> "DatabaseSort":
        return cls(timestamp=timestamp, direction=direction)


class DatabaseQuery(Paging):
    """Body of ``POST /databases/{id}/query``."""

    sorts: Optional[list[DatabaseSort]] = None
    filter: Optional[QueryFilter] = None


__all__ = [
    "SortDirection",
    "SortTimestamp",
    "FilterValue",
    "FilterProperty",
    "Sort",
    "SearchFilter",
    "SearchRequest",
    "QuerySearch",
    "SortSearch",
    "FilterSearch",
    "NotionSearch",
    "Condition",
    "TextCondition",
    "NumberCondition",
    "CheckboxCondition",
    "SelectCondition",
    "StatusCondition",
    "MultiSelectCondition",
    "DateCondition",
    "PeopleCondition",
    "FilesCondition",
    "RelationCondition",
    "FormulaCondition",
    "PropertyCondition",
    "FilterCondition",
    "TimestampCondition",
    "AndCondition",
    "OrCondition",
    "QueryFilter",
    "DatabaseSort",
    "DatabaseQuery",
]
