"""Database property configurations and page property values.

See https://developers.notion.com/reference/property-object (database schema)
and https://developers.notion.com/reference/property-value-object (page data).

Both sides are unions keyed by ``type``. Configurations describe the schema of
a database column; values are what a page holds for that column. Unknown
types decode into catch-all variants so new Notion features do not break
decoding of the surrounding page or database.
"""

from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import Field

from notion_typed.ids import DatabaseId, PageId, PropertyId
from notion_typed.models.base import CatchAllModel, DateValue, EmptyObject, NotionModel, open_enum, tagged_union
from notion_typed.models.files import FileObject
from notion_typed.models.text import RichText
from notion_typed.models.users import User

Number = int | float


class Color(str, Enum):
    """Colors available to select, multi-select and status options."""

    DEFAULT = "default"
    GRAY = "gray"
    BROWN = "brown"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    RED = "red"


class NumberFormat(str, Enum):
    """How a number property is displayed in Notion."""

    NUMBER = "number"
    NUMBER_WITH_COMMAS = "number_with_commas"
    PERCENT = "percent"
    DOLLAR = "dollar"
    CANADIAN_DOLLAR = "canadian_dollar"
    SINGAPORE_DOLLAR = "singapore_dollar"
    EURO = "euro"
    POUND = "pound"
    YEN = "yen"
    RUBLE = "ruble"
    RUPEE = "rupee"
    WON = "won"
    YUAN = "yuan"
    REAL = "real"
    LIRA = "lira"
    RUPIAH = "rupiah"
    FRANC = "franc"
    HONG_KONG_DOLLAR = "hong_kong_dollar"
    NEW_ZEALAND_DOLLAR = "new_zealand_dollar"
    KRONA = "krona"
    NORWEGIAN_KRONE = "norwegian_krone"
    MEXICAN_PESO = "mexican_peso"
    RAND = "rand"
    NEW_TAIWAN_DOLLAR = "new_taiwan_dollar"
    DANISH_KRONE = "danish_krone"
    ZLOTY = "zloty"
    BAHT = "baht"
    FORINT = "forint"
    KORUNA = "koruna"
    SHEKEL = "shekel"
    CHILEAN_PESO = "chilean_peso"
    PHILIPPINE_PESO = "philippine_peso"
    DIRHAM = "dirham"
    COLOMBIAN_PESO = "colombian_peso"
    RIYAL = "riyal"
    RINGGIT = "ringgit"
    LEU = "leu"
    ARGENTINE_PESO = "argentine_peso"
    URUGUAYAN_PESO = "uruguayan_peso"
    AUSTRALIAN_DOLLAR = "australian_dollar"
    PERUVIAN_SOL = "peruvian_sol"


class RollupFunction(str, Enum):
    """Aggregation applied by a rollup property."""

    AVERAGE = "average"
    CHECKED = "checked"
    COUNT = "count"
    COUNT_ALL = "count_all"
    COUNT_VALUES = "count_values"
    COUNT_UNIQUE_VALUES = "count_unique_values"
    COUNT_EMPTY = "count_empty"
    COUNT_NOT_EMPTY = "count_not_empty"
    COUNT_PER_GROUP = "count_per_group"
    DATE_RANGE = "date_range"
    EARLIEST_DATE = "earliest_date"
    EMPTY = "empty"
    LATEST_DATE = "latest_date"
    MAX = "max"
    MEDIAN = "median"
    MIN = "min"
    NOT_EMPTY = "not_empty"
    PERCENT_CHECKED = "percent_checked"
    PERCENT_EMPTY = "percent_empty"
    PERCENT_NOT_EMPTY = "percent_not_empty"
    PERCENT_PER_GROUP = "percent_per_group"
    PERCENT_UNCHECKED = "percent_unchecked"
    RANGE = "range"
    SHOW_ORIGINAL = "show_original"
    SHOW_UNIQUE = "show_unique"
    SUM = "sum"
    UNCHECKED = "unchecked"
    UNIQUE = "unique"


class SelectOption(NotionModel):
    id: str | None = None
    name: str
    color: Optional[open_enum(Color)] = None


# =============================================================================
# Configurations (database schema)
# =============================================================================


class ConfigurationCommon(NotionModel):
    id: PropertyId
    name: str | None = None
    description: str | None = None


class TitleConfiguration(ConfigurationCommon):
    type: Literal["title"] = "title"
    title: EmptyObject = Field(default_factory=EmptyObject)


class RichTextConfiguration(ConfigurationCommon):
    type: Literal["rich_text"] = "rich_text"
    rich_text: EmptyObject = Field(default_factory=EmptyObject)


class NumberSettings(NotionModel):
    format: open_enum(NumberFormat) = NumberFormat.NUMBER


class NumberConfiguration(ConfigurationCommon):
    type: Literal["number"] = "number"
    number: NumberSettings = Field(default_factory=NumberSettings)


class SelectSettings(NotionModel):
    """Sorted list of options available for this property."""

    options: list[SelectOption] = Field(default_factory=list)


class SelectConfiguration(ConfigurationCommon):
    type: Literal["select"] = "select"
    select: SelectSettings = Field(default_factory=SelectSettings)


class MultiSelectConfiguration(ConfigurationCommon):
    type: Literal["multi_select"] = "multi_select"
    multi_select: SelectSettings = Field(default_factory=SelectSettings)


class StatusGroup(NotionModel):
    id: str | None = None
    name: str
    color: Optional[open_enum(Color)] = None
    option_ids: list[str] = Field(default_factory=list)


class StatusSettings(NotionModel):
    options: list[SelectOption] = Field(default_factory=list)
    groups: list[StatusGroup] = Field(default_factory=list)


class StatusConfiguration(ConfigurationCommon):
    type: Literal["status"] = "status"
    status: StatusSettings = Field(default_factory=StatusSettings)


class DateConfiguration(ConfigurationCommon):
    type: Literal["date"] = "date"
    date: EmptyObject = Field(default_factory=EmptyObject)


class PeopleConfiguration(ConfigurationCommon):
    type: Literal["people"] = "people"
    people: EmptyObject = Field(default_factory=EmptyObject)


class FilesConfiguration(ConfigurationCommon):
    # Documented as "file" in places, the API sends "files"
    type: Literal["files"] = "files"
    files: EmptyObject = Field(default_factory=EmptyObject)


class CheckboxConfiguration(ConfigurationCommon):
    type: Literal["checkbox"] = "checkbox"
    checkbox: EmptyObject = Field(default_factory=EmptyObject)


class UrlConfiguration(ConfigurationCommon):
    type: Literal["url"] = "url"
    url: EmptyObject = Field(default_factory=EmptyObject)


class EmailConfiguration(ConfigurationCommon):
    type: Literal["email"] = "email"
    email: EmptyObject = Field(default_factory=EmptyObject)


class PhoneNumberConfiguration(ConfigurationCommon):
    type: Literal["phone_number"] = "phone_number"
    phone_number: EmptyObject = Field(default_factory=EmptyObject)


class FormulaSettings(NotionModel):
    expression: str


class FormulaConfiguration(ConfigurationCommon):
    type: Literal["formula"] = "formula"
    formula: FormulaSettings


class RelationSettings(CatchAllModel):
    """Target of a relation property.

    Relations are usually two synced properties across databases; the
    ``synced_property_*`` fields name the twin in the related database.
    Newer API versions add ``single_property``/``dual_property`` payloads,
    which are kept as extra fields.
    """

    database_id: DatabaseId
    type: str | None = None
    synced_property_name: str | None = None
    synced_property_id: Optional[PropertyId] = None


class RelationConfiguration(ConfigurationCommon):
    type: Literal["relation"] = "relation"
    relation: RelationSettings


class RollupSettings(NotionModel):
    relation_property_name: str
    relation_property_id: PropertyId
    rollup_property_name: str
    rollup_property_id: PropertyId
    function: open_enum(RollupFunction)


class RollupConfiguration(ConfigurationCommon):
    type: Literal["rollup"] = "rollup"
    rollup: RollupSettings


class CreatedTimeConfiguration(ConfigurationCommon):
    type: Literal["created_time"] = "created_time"
    created_time: EmptyObject = Field(default_factory=EmptyObject)


class CreatedByConfiguration(ConfigurationCommon):
    type: Literal["created_by"] = "created_by"
    created_by: EmptyObject = Field(default_factory=EmptyObject)


class LastEditedTimeConfiguration(ConfigurationCommon):
    type: Literal["last_edited_time"] = "last_edited_time"
    last_edited_time: EmptyObject = Field(default_factory=EmptyObject)


class LastEditedByConfiguration(ConfigurationCommon):
    type: Literal["last_edited_by"] = "last_edited_by"
    last_edited_by: EmptyObject = Field(default_factory=EmptyObject)


class UnknownConfiguration(CatchAllModel):
    """A property type this library does not model."""

    type: str
    id: Optional[PropertyId] = None
    name: str | None = None


PropertyConfiguration = tagged_union(
    TitleConfiguration,
    RichTextConfiguration,
    NumberConfiguration,
    SelectConfiguration,
    MultiSelectConfiguration,
    StatusConfiguration,
    DateConfiguration,
    PeopleConfiguration,
    FilesConfiguration,
    CheckboxConfiguration,
    UrlConfiguration,
    EmailConfiguration,
    PhoneNumberConfiguration,
    FormulaConfiguration,
    RelationConfiguration,
    RollupConfiguration,
    CreatedTimeConfiguration,
    CreatedByConfiguration,
    LastEditedTimeConfiguration,
    LastEditedByConfiguration,
    catch_all=UnknownConfiguration,
)


# =============================================================================
# Formula and rollup results
# =============================================================================


class StringFormula(NotionModel):
    type: Literal["string"] = "string"
    string: str | None = None


class NumberFormula(NotionModel):
    type: Literal["number"] = "number"
    number: Number | None = None


class BooleanFormula(NotionModel):
    type: Literal["boolean"] = "boolean"
    boolean: bool | None = None


class DateFormula(NotionModel):
    type: Literal["date"] = "date"
    date: Optional[DateValue] = None


# No catch-all: a formula result we cannot read is a decode error
FormulaResult = tagged_union(StringFormula, NumberFormula, BooleanFormula, DateFormula)


class RollupCommon(NotionModel):
    function: Optional[open_enum(RollupFunction)] = None


class NumberRollup(RollupCommon):
    type: Literal["number"] = "number"
    number: Number | None = None


class DateRollup(RollupCommon):
    type: Literal["date"] = "date"
    date: Optional[DateValue] = None


class ArrayRollup(RollupCommon):
    type: Literal["array"] = "array"
    # Elements are property values without an id
    array: list["PropertyValue"] = Field(default_factory=list)


class IncompleteRollup(RollupCommon):
    type: Literal["incomplete"] = "incomplete"
    incomplete: EmptyObject = Field(default_factory=EmptyObject)


class UnsupportedRollup(RollupCommon):
    type: Literal["unsupported"] = "unsupported"
    unsupported: EmptyObject = Field(default_factory=EmptyObject)


RollupResult = tagged_union(NumberRollup, DateRollup, ArrayRollup, IncompleteRollup, UnsupportedRollup)


# =============================================================================
# Values (page data)
# =============================================================================


class PropertyCommon(NotionModel):
    id: Optional[PropertyId] = None


class TitleProperty(PropertyCommon):
    type: Literal["title"] = "title"
    title: list[RichText] = Field(default_factory=list)


class RichTextProperty(PropertyCommon):
    type: Literal["rich_text"] = "rich_text"
    rich_text: list[RichText] = Field(default_factory=list)


class NumberProperty(PropertyCommon):
    type: Literal["number"] = "number"
    number: Number | None = None


class SelectProperty(PropertyCommon):
    type: Literal["select"] = "select"
    select: SelectOption | None = None


class MultiSelectProperty(PropertyCommon):
    type: Literal["multi_select"] = "multi_select"
    multi_select: list[SelectOption] = Field(default_factory=list)


class StatusProperty(PropertyCommon):
    type: Literal["status"] = "status"
    status: SelectOption | None = None


class DateProperty(PropertyCommon):
    type: Literal["date"] = "date"
    date: Optional[DateValue] = None


class PeopleProperty(PropertyCommon):
    type: Literal["people"] = "people"
    people: list[User] = Field(default_factory=list)


class FilesProperty(PropertyCommon):
    type: Literal["files"] = "files"
    files: list[FileObject] = Field(default_factory=list)


class CheckboxProperty(PropertyCommon):
    type: Literal["checkbox"] = "checkbox"
    checkbox: bool = False


class UrlProperty(PropertyCommon):
    type: Literal["url"] = "url"
    url: str | None = None


class EmailProperty(PropertyCommon):
    type: Literal["email"] = "email"
    email: str | None = None


class PhoneNumberProperty(PropertyCommon):
    type: Literal["phone_number"] = "phone_number"
    phone_number: str | None = None


class FormulaProperty(PropertyCommon):
    type: Literal["formula"] = "formula"
    formula: FormulaResult


class RelationReference(NotionModel):
    id: PageId


class RelationProperty(PropertyCommon):
    type: Literal["relation"] = "relation"
    relation: list[RelationReference] = Field(default_factory=list)
    has_more: bool | None = None


class RollupProperty(PropertyCommon):
    type: Literal["rollup"] = "rollup"
    rollup: RollupResult


class CreatedTimeProperty(PropertyCommon):
    type: Literal["created_time"] = "created_time"
    created_time: datetime


class CreatedByProperty(PropertyCommon):
    type: Literal["created_by"] = "created_by"
    created_by: User


class LastEditedTimeProperty(PropertyCommon):
    type: Literal["last_edited_time"] = "last_edited_time"
    last_edited_time: datetime


class LastEditedByProperty(PropertyCommon):
    type: Literal["last_edited_by"] = "last_edited_by"
    last_edited_by: User


class UniqueIdValue(NotionModel):
    prefix: str | None = None
    number: int | None = None

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.prefix}-{self.number}"
        return str(self.number)


class UniqueIdProperty(PropertyCommon):
    type: Literal["unique_id"] = "unique_id"
    unique_id: UniqueIdValue


class UnknownProperty(CatchAllModel):
    """A property value of a type this library does not model."""

    type: str
    id: Optional[PropertyId] = None


PropertyValue = tagged_union(
    TitleProperty,
    RichTextProperty,
    NumberProperty,
    SelectProperty,
    MultiSelectProperty,
    StatusProperty,
    DateProperty,
    PeopleProperty,
    FilesProperty,
    CheckboxProperty,
    UrlProperty,
    EmailProperty,
    PhoneNumberProperty,
    FormulaProperty,
    RelationProperty,
    RollupProperty,
    CreatedTimeProperty,
    CreatedByProperty,
    LastEditedTimeProperty,
    LastEditedByProperty,
    UniqueIdProperty,
    catch_all=UnknownProperty,
)
"""A page's value for one property."""

# Rollup arrays refer back to PropertyValue
ArrayRollup.model_rebuild()
RollupProperty.model_rebuild()


__all__ = [
    "Color",
    "NumberFormat",
    "RollupFunction",
    "SelectOption",
    "ConfigurationCommon",
    "TitleConfiguration",
    "RichTextConfiguration",
    "NumberSettings",
    "NumberConfiguration",
    "SelectSettings",
    "SelectConfiguration",
    "MultiSelectConfiguration",
    "StatusGroup",
    "StatusSettings",
    "StatusConfiguration",
    "DateConfiguration",
    "PeopleConfiguration",
    "FilesConfiguration",
    "CheckboxConfiguration",
    "UrlConfiguration",
    "EmailConfiguration",
    "PhoneNumberConfiguration",
    "FormulaSettings",
    "FormulaConfiguration",
    "RelationSettings",
    "RelationConfiguration",
    "RollupSettings",
    "RollupConfiguration",
    "CreatedTimeConfiguration",
    "CreatedByConfiguration",
    "LastEditedTimeConfiguration",
    "LastEditedByConfiguration",
    "UnknownConfiguration",
    "PropertyConfiguration",
    "StringFormula",
    "NumberFormula",
    "BooleanFormula",
    "DateFormula",
    "FormulaResult",
    "NumberRollup",
    "DateRollup",
    "ArrayRollup",
    "IncompleteRollup",
    "UnsupportedRollup",
    "RollupResult",
    "PropertyCommon",
    "TitleProperty",
    "RichTextProperty",
    "NumberProperty",
    "SelectProperty",
    "MultiSelectProperty",
    "StatusProperty",
    "DateProperty",
    "PeopleProperty",
    "FilesProperty",
    "CheckboxProperty",
    "UrlProperty",
    "EmailProperty",
    "PhoneNumberProperty",
    "FormulaProperty",
    "RelationReference",
    "RelationProperty",
    "RollupProperty",
    "CreatedTimeProperty",
    "CreatedByProperty",
    "LastEditedTimeProperty",
    "LastEditedByProperty",
    "UniqueIdValue",
    "UniqueIdProperty",
    "UnknownProperty",
    "PropertyValue",
]
