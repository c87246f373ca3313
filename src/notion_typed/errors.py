"""Exception hierarchy for the Notion client.

Every public operation either returns the expected type or raises one of
these. Nothing here is retried by the library.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from notion_typed.models.error import ErrorResponse


class NotionError(Exception):
    """Base exception for all errors raised by this library."""


class InvalidCredentialError(NotionError):
    """The API token cannot be used as a bearer header value."""


class TransportError(NotionError):
    """Network or IO failure while talking to the API."""


class DecodeError(NotionError):
    """A response body was not valid JSON or did not match the schema."""


class UnexpectedResponseError(NotionError):
    """The decoded object was not the kind the operation expects.

    Attributes:
        response: The decoded Object that was received instead.
    """

    def __init__(self, response: Any):
        kind = getattr(response, "object", type(response).__name__)
        super().__init__(f"Unexpected API response: got {kind!r} object")
        self.response = response


class ApiError(NotionError):
    """The API answered with an error object.

    Attributes:
        error: The decoded ErrorResponse.
    """

    def __init__(self, error: "ErrorResponse"):
        super().__init__(f"API Error {error.code_name}({error.status}): {error.message}")
        self.error = error

    @property
    def code(self):
        return self.error.code

    @property
    def code_name(self) -> str:
        """The server's error code string, also for codes without an ErrorCode member."""
        return self.error.code_name

    @property
    def status(self) -> int:
        return self.error.status

    @property
    def message(self) -> str:
        return self.error.message


__all__ = [
    "NotionError",
    "InvalidCredentialError",
    "TransportError",
    "DecodeError",
    "UnexpectedResponseError",
    "ApiError",
]
