"""
Profile GraphQL type definitions
"""

import strawberry

from ...store.models import ProfileRecord
from .user import User


@strawberry.type
class SocialLink:
    """External profile link."""

    platform: str
    url: str


@strawberry.type
class Profile:
    """Profile type for GraphQL API."""

    id: strawberry.ID
    user: User | None
    bio: str | None
    location: str | None
    website: str | None
    profile_picture: str | None
    cover_picture: str | None
    followers: int | None
    following: int | None
    social_links: list[SocialLink | None] | None

    @classmethod
    def from_record(cls, record: ProfileRecord) -> "Profile":
        social_links = None
        if record.social_links is not None:
            social_links = [
                SocialLink(platform=link.platform, url=link.url) for link in record.social_links
            ]

        return cls(
            id=strawberry.ID(record.id),
            user=User.from_record(record.user),
            bio=record.bio,
            location=record.location,
            website=record.website,
            profile_picture=record.profile_picture,
            cover_picture=record.cover_picture,
            followers=record.followers,
            following=record.following,
            social_links=social_links,
        )
