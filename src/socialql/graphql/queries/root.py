"""
Root GraphQL query definitions
"""

import strawberry

from ..inputs import UserSearchInput
from ..types.post import Post
from ..types.profile import Profile
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    # User queries
    @strawberry.field
    async def user(self, info: strawberry.Info, id: strawberry.ID) -> User | None:
        """Get a user by ID, with posts and profile attached."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)

    @strawberry.field
    async def users_by_name(
        self, info: strawberry.Info, name: str
    ) -> list[User | None] | None:
        """Find users whose first or last name contains the given text."""
        from ..resolvers.user import resolve_users_by_name

        return await resolve_users_by_name(info, name)

    @strawberry.field
    async def search_users(
        self, info: strawberry.Info, filter: UserSearchInput | None = None
    ) -> list[User | None] | None:
        """Search users by username, first name and last name."""
        from ..resolvers.user import search_users

        return await search_users(info, filter)

    # Post queries
    @strawberry.field
    async def post(self, info: strawberry.Info, id: strawberry.ID) -> Post | None:
        """Get a post by ID."""
        from ..resolvers.post import resolve_post_by_id

        return await resolve_post_by_id(info, id)

    @strawberry.field
    async def posts(
        self,
        info: strawberry.Info,
        limit: int | None = 10,
        offset: int | None = 0,
    ) -> list[Post | None] | None:
        """Get a page of posts in creation order."""
        from ..resolvers.post import resolve_posts

        return await resolve_posts(info, limit, offset)

    @strawberry.field
    async def user_posts(
        self, info: strawberry.Info, user_id: strawberry.ID
    ) -> list[Post | None] | None:
        """Get all posts written by a user."""
        from ..resolvers.post import resolve_user_posts

        return await resolve_user_posts(info, user_id)

    # Profile queries
    @strawberry.field
    async def profile(self, info: strawberry.Info, user_id: strawberry.ID) -> Profile | None:
        """Get the profile of a user."""
        from ..resolvers.profile import resolve_profile

        return await resolve_profile(info, user_id)
