"""Parent references.

See https://developers.notion.com/reference/parent-object

Pages, databases and blocks name where they live with a ``type`` tagged
parent. Parent kinds added later decode as UnknownParent.
"""

from typing import Literal

from notion_typed.ids import BlockId, DatabaseId, PageId
from notion_typed.models.base import CatchAllModel, NotionModel, tagged_union


class DatabaseParent(NotionModel):
    type: Literal["database_id"] = "database_id"
    database_id: DatabaseId


class PageParent(NotionModel):
    type: Literal["page_id"] = "page_id"
    page_id: PageId


class BlockParent(NotionModel):
    type: Literal["block_id"] = "block_id"
    block_id: BlockId


class WorkspaceParent(NotionModel):
    type: Literal["workspace"] = "workspace"
    workspace: bool = True


class UnknownParent(CatchAllModel):
    type: str


Parent = tagged_union(DatabaseParent, PageParent, BlockParent, WorkspaceParent, catch_all=UnknownParent)
"""Where a page, database or block lives."""


__all__ = [
    "DatabaseParent",
    "PageParent",
    "BlockParent",
    "WorkspaceParent",
    "UnknownParent",
    "Parent",
]
