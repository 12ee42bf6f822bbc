"""
Root GraphQL mutation definitions
"""

import strawberry

from ..inputs import (
    PostCreateInput,
    PostUpdateInput,
    ProfileUpdateInput,
    UserCreateInput,
    UserUpdateInput,
)
from ..types.post import Post
from ..types.profile import Profile
from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, input: UserCreateInput) -> User | None:
        """Create a new user and its profile."""
        from ..resolvers.user import create_user

        return await create_user(info, input)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self, info: strawberry.Info, id: strawberry.ID, input: UserUpdateInput
    ) -> User | None:
        """Update an existing user."""
        from ..resolvers.user import update_user

        return await update_user(info, id, input)

    # Post mutations
    @strawberry.mutation(name="addPost")
    async def add_post(self, info: strawberry.Info, input: PostCreateInput) -> Post | None:
        """Create a new post."""
        from ..resolvers.post import add_post

        return await add_post(info, input)

    @strawberry.mutation(name="updatePost")
    async def update_post(
        self, info: strawberry.Info, id: strawberry.ID, input: PostUpdateInput
    ) -> Post | None:
        """Update an existing post."""
        from ..resolvers.post import update_post

        return await update_post(info, id, input)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: strawberry.Info, id: strawberry.ID) -> bool | None:
        """Delete a post."""
        from ..resolvers.post import delete_post

        return await delete_post(info, id)

    # Profile mutations
    @strawberry.mutation(name="updateProfile")
    async def update_profile(
        self, info: strawberry.Info, user_id: strawberry.ID, input: ProfileUpdateInput
    ) -> Profile | None:
        """Update the profile of a user."""
        from ..resolvers.profile import update_profile

        return await update_profile(info, user_id, input)
