"""User objects.

See https://developers.notion.com/reference/user

Users appear in full (``GET /users``) and as partial references
(``created_by``, mentions, people properties) that only carry an id. A user
document without a recognised ``type`` decodes as a bare UserCommon.
"""

from typing import Literal, Optional

from notion_typed.ids import UserId
from notion_typed.models.base import NotionModel, tagged_union


class UserCommon(NotionModel):
    """Fields shared by every user, and the shape of a partial user."""

    object: Literal["user"] = "user"
    id: UserId
    name: str | None = None
    avatar_url: str | None = None

    def as_id(self) -> UserId:
        return self.id


class Person(NotionModel):
    # Only present when the integration has the user email capability
    email: str | None = None


class PersonUser(UserCommon):
    type: Literal["person"] = "person"
    person: Person


class WorkspaceOwner(NotionModel):
    type: Literal["workspace"] = "workspace"
    workspace: bool = True


class UserOwner(NotionModel):
    type: Literal["user"] = "user"
    user: UserCommon


BotOwner = tagged_union(WorkspaceOwner, UserOwner)


class Bot(NotionModel):
    """Bot details; empty when the bot is not the requesting integration."""

    owner: Optional[BotOwner] = None
    workspace_name: str | None = None


class BotUser(UserCommon):
    type: Literal["bot"] = "bot"
    bot: Bot


USER_TYPES = {"person": PersonUser, "bot": BotUser}

User = tagged_union(PersonUser, BotUser, catch_all=UserCommon)
"""A person, a bot, or a partial user reference."""


__all__ = [
    "UserCommon",
    "Person",
    "PersonUser",
    "WorkspaceOwner",
    "UserOwner",
    "BotOwner",
    "Bot",
    "BotUser",
    "User",
    "USER_TYPES",
]
