"""Typed models for Notion API documents and requests.

Module structure:
- base: model base classes and tagged union helpers
- text: rich text and mentions
- users: people and bots
- files: file objects and icons
- properties: database property configurations and page property values
- blocks: block types
- paging: cursors and paging parameters
- parents: where pages, databases and blocks live
- error: API error payload
- objects: pages, databases, lists and the Object envelope
- search: search requests and database query filters
- requests: page creation
"""

from notion_typed.models.base import *  # noqa: F401,F403
from notion_typed.models.text import *  # noqa: F401,F403
from notion_typed.models.users import *  # noqa: F401,F403
from notion_typed.models.files import *  # noqa: F401,F403
from notion_typed.models.properties import *  # noqa: F401,F403
from notion_typed.models.blocks import *  # noqa: F401,F403
from notion_typed.models.paging import *  # noqa: F401,F403
from notion_typed.models.parents import *  # noqa: F401,F403
from notion_typed.models.error import *  # noqa: F401,F403
from notion_typed.models.objects import *  # noqa: F401,F403
from notion_typed.models.search import *  # noqa: F401,F403
from notion_typed.models.requests import *  # noqa: F401,F403

from notion_typed.models import base, blocks, error, files, objects, paging, parents, properties, requests, search, text, users

__all__ = (
    base.__all__
    + text.__all__
    + users.__all__
    + files.__all__
    + properties.__all__
    + blocks.__all__
    + paging.__all__
    + parents.__all__
    + error.__all__
    + objects.__all__
    + search.__all__
    + requests.__all__
)
