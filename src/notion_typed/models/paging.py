"""Cursor based pagination.

See https://developers.notion.com/reference/intro#pagination
"""

from typing import Any, Optional

from notion_typed.ids import Identifier
from notion_typed.models.base import NotionModel


class PagingCursor(Identifier):
    """Opaque cursor returned as ``next_cursor`` and sent back as ``start_cursor``."""

    __slots__ = ()


class Paging(NotionModel):
    """Pagination parameters shared by list endpoints.

    ``page_size`` is passed through as is; the API caps it at 100.
    """

    start_cursor: Optional[PagingCursor] = None
    page_size: int | None = None

    def to_params(self) -> dict[str, Any]:
        """Query string parameters for GET endpoints, unset values left out."""
        params: dict[str, Any] = {}
        if self.start_cursor is not None:
            params["start_cursor"] = self.start_cursor.value
        if self.page_size is not None:
            params["page_size"] = self.page_size
        return params


__all__ = ["PagingCursor", "Paging"]
