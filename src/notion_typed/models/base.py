"""Shared building blocks for the Notion model layer.

Notion discriminates most unions with a ``type`` field (``object`` for the
top-level envelope) and mixes common fields with the variant payload in one
flat document. Variants are plain pydantic models that inherit the common
fields; unions are built with a callable discriminator so an unrecognised tag
can fall through to a catch-all model instead of failing the whole document.
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, Callable, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    PlainSerializer,
    PlainValidator,
    Tag,
    TypeAdapter,
)

# Tag used for the catch-all member of a union
CATCH_ALL = "*"


class NotionModel(BaseModel):
    """Base for every wire model: immutable, snake_case, omit-on-serialize."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict, leaving out unset (None) fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CatchAllModel(NotionModel):
    """Base for catch-all variants; keeps every field it was given."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


class EmptyObject(NotionModel):
    """Payload of variants that carry no data, serialized as ``{}``."""


def read_tag(value: Any, field: str) -> Any:
    """Read a discriminator from a raw dict or an already-built model."""
    if isinstance(value, dict):
        return value.get(field)
    return getattr(value, field, None)


def union_of(choices: Mapping[str, Any], discriminate: Callable[[Any], Any]) -> Any:
    """Build a discriminated union from a tag -> member mapping.

    Args:
        choices: Mapping of tag to member type. Members may themselves be
            unions.
        discriminate: Callable returning the tag for a raw value. Returning
            None or a tag missing from ``choices`` fails validation.

    Returns:
        An ``Annotated`` union type usable as a pydantic field annotation.
    """
    members = tuple(Annotated[member, Tag(tag)] for tag, member in choices.items())
    return Annotated[Union[members], Discriminator(discriminate)]


def tagged_union(*members: type[BaseModel], field: str = "type", catch_all: type[BaseModel] | None = None) -> Any:
    """Build a union keyed by the literal default of ``field`` on each member.

    Args:
        members: Variant models; each declares ``field`` as a Literal with a
            default value.
        field: Name of the discriminator field on the wire.
        catch_all: Optional model receiving any unrecognised tag.

    Returns:
        An ``Annotated`` union type.
    """
    choices: dict[str, Any] = {}
    for member in members:
        choices[member.model_fields[field].default] = member
    known = frozenset(choices)
    if catch_all is not None:
        choices[CATCH_ALL] = catch_all

    def discriminate(value: Any) -> Any:
        tag = read_tag(value, field)
        if tag in known:
            return tag
        if catch_all is not None:
            return CATCH_ALL
        return tag

    return union_of(choices, discriminate)


def tags_of(*members: type[BaseModel], field: str = "type") -> dict[str, type[BaseModel]]:
    """Map each member's literal tag to the member."""
    return {member.model_fields[field].default: member for member in members}


def open_enum(enum: type[Enum]) -> Any:
    """A member of ``enum``, or the raw string for values Notion adds later.

    Known values decode to the enum member; anything else is kept as a plain
    ``str`` and serialized back unchanged.
    """

    def parse(value: Any) -> Any:
        if isinstance(value, enum):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Expected a {enum.__name__} string, got {type(value).__name__}")
        try:
            return enum(value)
        except ValueError:
            return value

    return Annotated[
        Union[enum, str],
        PlainValidator(parse),
        PlainSerializer(lambda value: value.value if isinstance(value, Enum) else value, return_type=str),
    ]


_DATETIME = TypeAdapter(datetime)


def _parse_date_or_datetime(value: Any) -> date | datetime:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected an ISO 8601 date string, got {type(value).__name__}")
    # 2022-04-16 is a calendar date, anything longer carries a time
    if len(value) == 10:
        return date.fromisoformat(value)
    return _DATETIME.validate_python(value)


DateOrDateTime = Annotated[
    Union[date, datetime],
    PlainValidator(_parse_date_or_datetime),
    PlainSerializer(lambda value: value.isoformat(), return_type=str),
]
"""A calendar date or a timestamp, as used by date properties and mentions."""


class DateValue(NotionModel):
    """A date or date range.

    ``start`` and ``end`` are plain dates for all-day values and timestamps
    otherwise. ``time_zone`` is only present when the user picked one.
    """

    start: DateOrDateTime
    end: Optional[DateOrDateTime] = None
    time_zone: str | None = None


__all__ = [
    "CATCH_ALL",
    "NotionModel",
    "CatchAllModel",
    "EmptyObject",
    "DateOrDateTime",
    "DateValue",
    "read_tag",
    "union_of",
    "tagged_union",
    "tags_of",
    "open_enum",
]
