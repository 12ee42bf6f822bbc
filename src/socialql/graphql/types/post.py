"""
Post and Comment GraphQL type definitions
"""

import strawberry

from ...store.models import CommentRecord, PostRecord
from .user import User


@strawberry.type
class Comment:
    """Comment type for GraphQL API. No mutation creates comments yet."""

    id: strawberry.ID
    content: str
    author: User
    created_at: str | None

    @classmethod
    def from_record(cls, record: CommentRecord) -> "Comment":
        return cls(
            id=strawberry.ID(record.id),
            content=record.content,
            author=User.from_record(record.author),
            created_at=record.created_at,
        )


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    title: str | None
    content: str
    author: User
    created_at: str | None
    updated_at: str | None
    likes: int | None
    comments: list[Comment | None] | None

    @classmethod
    def from_record(cls, record: PostRecord) -> "Post":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            content=record.content,
            author=User.from_record(record.author),
            created_at=record.created_at,
            updated_at=record.updated_at,
            likes=record.likes,
            comments=[Comment.from_record(comment) for comment in record.comments],
        )
