from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import SocialLinkRecord, merge
from ..context import get_store_from_info
from ..inputs import provided_fields

if TYPE_CHECKING:
    from ..inputs import ProfileUpdateInput
    from ..types.profile import Profile

logger = get_logger(__name__)


async def resolve_profile(info: strawberry.Info, user_id: str) -> Profile | None:
    """Resolve the profile owned by ``user_id``."""
    from ..types.profile import Profile as ProfileType

    store = get_store_from_info(info)
    profile = store.find_profile(user_id)
    if profile is None:
        logger.info("Profile not found", user_id=user_id)
        return None
    return ProfileType.from_record(profile)


async def update_profile(
    info: strawberry.Info, user_id: str, input: ProfileUpdateInput
) -> Profile | None:
    """Shallow-merge the provided fields into the profile owned by ``user_id``."""
    from ..types.profile import Profile as ProfileType

    store = get_store_from_info(info)
    changes = provided_fields(input)

    links = changes.get("social_links")
    if links is not None:
        changes["social_links"] = tuple(
            SocialLinkRecord(platform=link.platform, url=link.url)
            for link in links
            if link is not None
        )

    with store.lock:
        index = store.profile_index(user_id)
        if index == -1:
            logger.info("Profile not found for update", user_id=user_id)
            return None

        profile = merge(store.profiles[index], changes)
        store.profiles[index] = profile

    logger.info("Profile updated", user_id=user_id, fields=sorted(changes))
    return ProfileType.from_record(profile)
