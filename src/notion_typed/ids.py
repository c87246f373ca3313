"""Identifier kit - nominal ID types for Notion entities.

Every entity kind gets its own wrapper around the raw id string so that a
BlockId can never be passed where a PageId is expected. The only sanctioned
conversion is PageId -> BlockId: a page is addressable as the root block of
its content.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class Identifier:
    """Opaque, immutable string wrapper.

    Two identifiers are equal only when they are of the same kind and wrap the
    same string. Hashing uses the underlying string.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> str:
        """The raw id string as sent by the API."""
        return self._value

    def as_id(self):
        return self

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self):
        return (type(self), (self._value,))

    @classmethod
    def _validate(cls, value: Any) -> "Identifier":
        if isinstance(value, cls):
            return value
        if isinstance(value, Identifier):
            raise ValueError(f"Expected {cls.__name__}, got {type(value).__name__}")
        if isinstance(value, str):
            return cls(value)
        raise ValueError(f"{cls.__name__} must be built from a string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda ident: ident.value,
                return_schema=core_schema.str_schema(),
            ),
        )


IdT = TypeVar("IdT", bound=Identifier, covariant=True)


@runtime_checkable
class AsIdentifier(Protocol[IdT]):
    """Anything that can yield an identifier of a given kind.

    Identifiers implement this as identity; entities (Database, Page, blocks,
    users) return their own id. API methods accept ``AsIdentifier[DatabaseId]``
    so callers can pass either the id or the full entity.
    """

    def as_id(self) -> IdT:
        ...


class DatabaseId(Identifier):
    __slots__ = ()


class PageId(Identifier):
    __slots__ = ()

    def as_block_id(self) -> "BlockId":
        """Address this page as the root block of its content."""
        return BlockId(self._value)


class BlockId(Identifier):
    __slots__ = ()

    @classmethod
    def from_page_id(cls, page_id: PageId) -> "BlockId":
        return page_id.as_block_id()


class UserId(Identifier):
    __slots__ = ()


class PropertyId(Identifier):
    __slots__ = ()


def require_id(value: AsIdentifier, kind: type[IdT]) -> IdT:
    """Resolve ``value`` to an identifier of ``kind``.

    Args:
        value: An identifier or an entity carrying one.
        kind: The expected identifier class.

    Returns:
        The identifier of the requested kind.

    Raises:
        TypeError: If ``value`` does not yield an identifier of ``kind``.
    """
    if not isinstance(value, AsIdentifier):
        raise TypeError(f"Expected something identifiable as {kind.__name__}, got {type(value).__name__}")
    ident = value.as_id()
    if not isinstance(ident, kind):
        raise TypeError(f"Expected {kind.__name__}, got {type(ident).__name__}")
    return ident


__all__ = [
    "Identifier",
    "AsIdentifier",
    "DatabaseId",
    "PageId",
    "BlockId",
    "UserId",
    "PropertyId",
    "require_id",
]
