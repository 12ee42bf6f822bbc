"""
GraphQL input types shared by queries and mutations
"""

import dataclasses
from typing import Any

import strawberry
from strawberry import UNSET


@strawberry.input
class UserCreateInput:
    """Input for creating a new user."""

    username: str
    email: str
    password: str
    first_name: str | None = UNSET
    last_name: str | None = UNSET


@strawberry.input
class UserUpdateInput:
    """Input for updating a user. Omitted fields are left untouched."""

    email: str | None = UNSET
    first_name: str | None = UNSET
    last_name: str | None = UNSET


@strawberry.input
class UserSearchInput:
    """Case-insensitive substring filters, combined with AND."""

    username: str | None = UNSET
    first_name: str | None = UNSET
    last_name: str | None = UNSET


@strawberry.input
class PostCreateInput:
    """Input for creating a new post."""

    content: str
    author_id: strawberry.ID
    title: str | None = UNSET


@strawberry.input
class PostUpdateInput:
    """Input for updating a post."""

    title: str | None = UNSET
    content: str | None = UNSET


@strawberry.input
class SocialLinkInput:
    platform: str
    url: str


@strawberry.input
class ProfileUpdateInput:
    """Input for updating a profile. ``social_links`` replaces the whole list."""

    bio: str | None = UNSET
    location: str | None = UNSET
    website: str | None = UNSET
    profile_picture: str | None = UNSET
    cover_picture: str | None = UNSET
    social_links: list[SocialLinkInput | None] | None = UNSET


def provided_fields(input: Any) -> dict[str, Any]:
    """Collect the fields the client actually sent, explicit nulls included."""
    return {
        field.name: getattr(input, field.name)
        for field in dataclasses.fields(input)
        if getattr(input, field.name) is not UNSET
    }


def unset_to_none(value: Any) -> Any:
    return None if value is UNSET else value
