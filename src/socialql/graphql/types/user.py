"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import UserRecord

if TYPE_CHECKING:
    from .post import Post
    from .profile import Profile


@strawberry.type
class User:
    """User type for GraphQL API.

    ``profile`` and ``posts`` are only filled in by the single-user query;
    every other path returns them as null.
    """

    id: strawberry.ID
    username: str
    email: str
    first_name: str | None
    last_name: str | None
    date_joined: str | None
    profile: Annotated["Profile", strawberry.lazy(".profile")] | None = None
    posts: list[Annotated["Post", strawberry.lazy(".post")] | None] | None = None

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(
            id=strawberry.ID(record.id),
            username=record.username,
            email=record.email,
            first_name=record.first_name,
            last_name=record.last_name,
            date_joined=record.date_joined,
        )
