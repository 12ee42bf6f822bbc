from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import ProfileRecord, UserRecord, merge, utc_timestamp
from ..context import get_store_from_info
from ..inputs import provided_fields, unset_to_none

if TYPE_CHECKING:
    from ..inputs import UserCreateInput, UserSearchInput, UserUpdateInput
    from ..types.user import User

logger = get_logger(__name__)


def _contains(value: str | None, needle: str) -> bool:
    # Users without the compared name never match
    return value is not None and needle in value.lower()


# Query resolvers
async def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    """
    Resolve a user by ID and join in their posts and profile.

    The join lives on the returned object only; the stored record is unchanged.
    """
    from ..types.post import Post
    from ..types.profile import Profile
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    record = store.find_user(id)
    if record is None:
        logger.info("User not found", user_id=id)
        return None

    user = UserType.from_record(record)
    user.posts = [Post.from_record(post) for post in store.posts_by_author(record.id)]
    profile = store.find_profile(record.id)
    user.profile = Profile.from_record(profile) if profile is not None else None
    return user


async def resolve_users_by_name(info: strawberry.Info, name: str) -> list[User]:
    """Users whose first or last name contains ``name``, ignoring case."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    needle = name.lower()

    return [
        UserType.from_record(user)
        for user in store.users
        if _contains(user.first_name, needle) or _contains(user.last_name, needle)
    ]


async def search_users(info: strawberry.Info, filter: UserSearchInput | None) -> list[User]:
    """
    Search users with an AND of optional substring filters.

    Empty or omitted filter fields are ignored; no filter returns every user.
    """
    from ..types.user import User as UserType

    store = get_store_from_info(info)

    criteria: list[tuple[str, str]] = []
    if filter is not None:
        for attr in ("username", "first_name", "last_name"):
            value = getattr(filter, attr)
            if value:
                criteria.append((attr, value.lower()))

    return [
        UserType.from_record(user)
        for user in store.users
        if all(_contains(getattr(user, attr), needle) for attr, needle in criteria)
    ]


# Mutation resolvers
async def create_user(info: strawberry.Info, input: UserCreateInput) -> User:
    """Create a user together with its empty profile."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)

    with store.lock:
        user = UserRecord(
            id=store.next_user_id(),
            username=input.username,
            email=input.email,
            password=input.password,
            first_name=unset_to_none(input.first_name),
            last_name=unset_to_none(input.last_name),
            date_joined=utc_timestamp(),
        )
        profile = ProfileRecord(id=store.next_profile_id(), user=user)

        store.users.append(user)
        store.profiles.append(profile)

    logger.info("User created", user_id=user.id, profile_id=profile.id)
    return UserType.from_record(user)


async def update_user(info: strawberry.Info, id: str, input: UserUpdateInput) -> User | None:
    """Shallow-merge the provided fields into an existing user."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    changes = provided_fields(input)

    with store.lock:
        index = store.user_index(id)
        if index == -1:
            logger.info("User not found for update", user_id=id)
            return None

        user = merge(store.users[index], changes)
        store.users[index] = user

    logger.info("User updated", user_id=id, fields=sorted(changes))
    return UserType.from_record(user)
