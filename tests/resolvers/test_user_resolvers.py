"""
Tests for user GraphQL resolvers
"""

import pytest

from socialql.graphql.inputs import (
    PostCreateInput,
    UserCreateInput,
    UserSearchInput,
    UserUpdateInput,
)
from socialql.graphql.resolvers.post import add_post
from socialql.graphql.resolvers.user import (
    create_user,
    resolve_user_by_id,
    resolve_users_by_name,
    search_users,
    update_user,
)


async def seed_user(info, username, first_name=None, last_name=None):
    kwargs = {}
    if first_name is not None:
        kwargs["first_name"] = first_name
    if last_name is not None:
        kwargs["last_name"] = last_name
    return await create_user(
        info,
        UserCreateInput(
            username=username, email=f"{username}@example.com", password="secret", **kwargs
        ),
    )


class TestCreateUser:
    """Tests for create_user mutation resolver."""

    @pytest.mark.asyncio
    async def test_creates_user_and_empty_profile(self, mock_info, store):
        user = await seed_user(mock_info, "al", "A", "L")

        assert user.id == "0"
        assert user.username == "al"
        assert user.first_name == "A"
        assert user.last_name == "L"
        assert user.date_joined.endswith("Z")

        assert len(store.users) == 1
        assert store.users[0].password == "secret"
        profile = store.profiles[0]
        assert profile.user.id == "0"
        assert profile.bio == "" and profile.location == "" and profile.website == ""
        assert profile.followers == 0 and profile.following == 0
        assert profile.social_links == ()

    @pytest.mark.asyncio
    async def test_omitted_names_are_null(self, mock_info):
        user = await seed_user(mock_info, "anon")

        assert user.first_name is None
        assert user.last_name is None

    @pytest.mark.asyncio
    async def test_duplicate_usernames_are_allowed(self, mock_info, store):
        first = await seed_user(mock_info, "dup")
        second = await seed_user(mock_info, "dup")

        assert (first.id, second.id) == ("0", "1")
        assert [p.id for p in store.profiles] == ["0", "1"]


class TestResolveUserById:
    """Tests for resolve_user_by_id."""

    @pytest.mark.asyncio
    async def test_missing_user_returns_none(self, mock_info):
        assert await resolve_user_by_id(mock_info, "42") is None

    @pytest.mark.asyncio
    async def test_attaches_posts_and_profile(self, mock_info, store):
        await seed_user(mock_info, "al")
        await seed_user(mock_info, "bo")
        await add_post(mock_info, PostCreateInput(content="one", author_id="0"))
        await add_post(mock_info, PostCreateInput(content="other", author_id="1"))
        await add_post(mock_info, PostCreateInput(content="two", author_id="0"))

        user = await resolve_user_by_id(mock_info, "0")

        assert [p.content for p in user.posts] == ["one", "two"]
        assert user.profile.id == "0"
        assert user.profile.user.id == "0"

    @pytest.mark.asyncio
    async def test_join_is_not_stored(self, mock_info, store):
        await seed_user(mock_info, "al")
        await resolve_user_by_id(mock_info, "0")

        assert not hasattr(store.users[0], "posts")


class TestUpdateUser:
    """Tests for update_user mutation resolver."""

    @pytest.mark.asyncio
    async def test_missing_user_returns_none(self, mock_info):
        assert await update_user(mock_info, "9", UserUpdateInput(email="x@y.z")) is None

    @pytest.mark.asyncio
    async def test_shallow_merge_keeps_omitted_fields(self, mock_info, store):
        created = await seed_user(mock_info, "al", "A", "L")

        updated = await update_user(mock_info, "0", UserUpdateInput(first_name="Alan"))

        assert updated.first_name == "Alan"
        assert updated.last_name == "L"
        assert updated.email == "al@example.com"
        assert updated.id == created.id
        assert updated.date_joined == created.date_joined
        assert store.users[0].first_name == "Alan"

    @pytest.mark.asyncio
    async def test_explicit_null_overwrites(self, mock_info):
        await seed_user(mock_info, "al", "A", "L")

        updated = await update_user(mock_info, "0", UserUpdateInput(last_name=None))

        assert updated.last_name is None
        assert updated.first_name == "A"


class TestUsersByName:
    """Tests for resolve_users_by_name."""

    @pytest.mark.asyncio
    async def test_matches_first_or_last_name_ignoring_case(self, mock_info):
        await seed_user(mock_info, "ada", "Ada", "Lovelace")
        await seed_user(mock_info, "alan", "Alan", "Turing")
        await seed_user(mock_info, "grace", "Grace", "Hopper")

        by_first = await resolve_users_by_name(mock_info, "AL")
        by_last = await resolve_users_by_name(mock_info, "hop")

        assert [u.username for u in by_first] == ["alan"]
        assert [u.username for u in by_last] == ["grace"]

    @pytest.mark.asyncio
    async def test_users_without_names_never_match(self, mock_info):
        """Users missing a first or last name are skipped rather than failing the query."""
        await seed_user(mock_info, "anon")
        await seed_user(mock_info, "half", first_name="Ada")
        await seed_user(mock_info, "other_half", last_name="Adams")

        result = await resolve_users_by_name(mock_info, "ada")

        assert [u.username for u in result] == ["half", "other_half"]


class TestSearchUsers:
    """Tests for search_users."""

    @pytest.mark.asyncio
    async def test_filters_are_combined_with_and(self, mock_info):
        await seed_user(mock_info, "ada_l", "Ada", "Lovelace")
        await seed_user(mock_info, "ada_b", "Ada", "Byron")
        await seed_user(mock_info, "alan", "Alan", "Turing")

        result = await search_users(
            mock_info, UserSearchInput(first_name="ada", last_name="LOVE")
        )

        assert [u.username for u in result] == ["ada_l"]

    @pytest.mark.asyncio
    async def test_username_filter(self, mock_info):
        await seed_user(mock_info, "ada_l", "Ada", "Lovelace")
        await seed_user(mock_info, "alan", "Alan", "Turing")

        result = await search_users(mock_info, UserSearchInput(username="AL"))

        assert [u.username for u in result] == ["alan"]

    @pytest.mark.asyncio
    async def test_empty_or_missing_filter_returns_everyone(self, mock_info):
        await seed_user(mock_info, "a")
        await seed_user(mock_info, "b")

        assert len(await search_users(mock_info, None)) == 2
        assert len(await search_users(mock_info, UserSearchInput())) == 2
        assert len(await search_users(mock_info, UserSearchInput(first_name=""))) == 2

    @pytest.mark.asyncio
    async def test_filtering_on_absent_field_skips_user(self, mock_info):
        """A filter on a name the user does not have excludes that user instead of failing."""
        await seed_user(mock_info, "anon")
        await seed_user(mock_info, "ada", "Ada", "Lovelace")

        result = await search_users(mock_info, UserSearchInput(last_name="love"))

        assert [u.username for u in result] == ["ada"]
