"""Error objects returned by the API.

See https://developers.notion.com/reference/errors
"""

from enum import Enum
from typing import Any, Literal

from pydantic import Field, field_serializer, model_validator

from notion_typed.models.base import NotionModel


class ErrorCode(str, Enum):
    INVALID_JSON = "invalid_json"
    INVALID_REQUEST_URL = "invalid_request_url"
    INVALID_REQUEST = "invalid_request"
    VALIDATION_ERROR = "validation_error"
    MISSING_VERSION = "missing_version"
    UNAUTHORIZED = "unauthorized"
    RESTRICTED_RESOURCE = "restricted_resource"
    OBJECT_NOT_FOUND = "object_not_found"
    CONFLICT_ERROR = "conflict_error"
    RATE_LIMITED = "rate_limited"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    DATABASE_CONNECTION_UNAVAILABLE = "database_connection_unavailable"
    GATEWAY_TIMEOUT = "gateway_timeout"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        # Codes added after this release still decode
        return cls.UNKNOWN


class ErrorResponse(NotionModel):
    """An ``{"object": "error"}`` document.

    ``code`` is UNKNOWN for codes added after this release; ``raw_code``
    always holds the string the server sent and is what gets serialized.
    """

    object: Literal["error"] = "error"
    status: int
    code: ErrorCode
    message: str
    request_id: str | None = None
    raw_code: str | None = Field(default=None, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _keep_raw_code(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("raw_code") is None and isinstance(data.get("code"), str):
            code = data["code"]
            data = {**data, "raw_code": code.value if isinstance(code, ErrorCode) else code}
        return data

    @field_serializer("code")
    def _serialize_code(self, code: ErrorCode) -> str:
        return self.raw_code or code.value

    @property
    def code_name(self) -> str:
        """The error code exactly as sent by the server."""
        return self.raw_code or self.code.value


__all__ = ["ErrorCode", "ErrorResponse"]
