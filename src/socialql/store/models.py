"""
Record types held by the entity store
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision, e.g. 2024-05-01T10:00:00.000Z."""
    now = datetime.now(UTC)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class UserRecord:
    id: str
    username: str
    email: str
    date_joined: str
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None


@dataclass(frozen=True)
class SocialLinkRecord:
    platform: str
    url: str


@dataclass(frozen=True)
class ProfileRecord:
    """Profile owned by a user.

    ``user`` is the snapshot of the owner taken when the profile was created;
    lookups compare on ``user.id`` only.
    """

    id: str
    user: UserRecord
    bio: str | None = ""
    location: str | None = ""
    website: str | None = ""
    profile_picture: str | None = ""
    cover_picture: str | None = ""
    followers: int = 0
    following: int = 0
    social_links: tuple[SocialLinkRecord, ...] | None = ()


@dataclass(frozen=True)
class CommentRecord:
    id: str
    content: str
    author: UserRecord
    created_at: str


@dataclass(frozen=True)
class PostRecord:
    """A post and the author snapshot it was written with."""

    id: str
    content: str
    author: UserRecord
    created_at: str
    updated_at: str
    title: str | None = None
    likes: int = 0
    comments: tuple[CommentRecord, ...] = field(default_factory=tuple)
