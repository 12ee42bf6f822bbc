from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import EntityStore, PostRecord, merge, utc_timestamp
from ..context import get_store_from_info
from ..inputs import provided_fields, unset_to_none

if TYPE_CHECKING:
    from ..inputs import PostCreateInput, PostUpdateInput
    from ..types.post import Post

logger = get_logger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0


def _with_live_author(store: EntityStore, post: PostRecord) -> PostRecord:
    """Copy of ``post`` whose author is the current stored user."""
    author = store.find_user(post.author.id)
    if author is None or author is post.author:
        return post
    return merge(post, {"author": author})


# Query resolvers
async def resolve_post_by_id(info: strawberry.Info, id: str) -> Post | None:
    """
    Resolve a post by ID.

    The author snapshot is refreshed from the user collection and written back.
    """
    from ..types.post import Post as PostType

    store = get_store_from_info(info)

    with store.lock:
        index = store.post_index(id)
        if index == -1:
            logger.info("Post not found", post_id=id)
            return None

        post = _with_live_author(store, store.posts[index])
        store.posts[index] = post

    return PostType.from_record(post)


async def resolve_posts(info: strawberry.Info, limit: int | None, offset: int | None) -> list[Post]:
    """A window of posts in insertion order, each with a live author."""
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    limit = DEFAULT_LIMIT if limit is None else limit
    offset = DEFAULT_OFFSET if offset is None else offset

    with store.lock:
        window = store.posts[offset : offset + limit]
        return [PostType.from_record(_with_live_author(store, post)) for post in window]


async def resolve_user_posts(info: strawberry.Info, user_id: str) -> list[Post]:
    """Posts by author id, returned with the author snapshot they were stored with."""
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    return [PostType.from_record(post) for post in store.posts_by_author(user_id)]


# Mutation resolvers
async def add_post(info: strawberry.Info, input: PostCreateInput) -> Post:
    """Create a post for an existing author."""
    from ..types.post import Post as PostType

    store = get_store_from_info(info)

    with store.lock:
        author = store.find_user(input.author_id)
        if author is None:
            logger.warning("Cannot add post, author not found", author_id=input.author_id)
            raise RuntimeError("Author not found")

        now = utc_timestamp()
        post = PostRecord(
            id=store.next_post_id(),
            title=unset_to_none(input.title),
            content=input.content,
            author=author,
            created_at=now,
            updated_at=now,
        )
        store.posts.append(post)

    logger.info("Post created", post_id=post.id, author_id=author.id)
    return PostType.from_record(post)


async def update_post(info: strawberry.Info, id: str, input: PostUpdateInput) -> Post | None:
    """Shallow-merge the provided fields and bump ``updatedAt``."""
    from ..types.post import Post as PostType

    store = get_store_from_info(info)
    changes = provided_fields(input)

    with store.lock:
        index = store.post_index(id)
        if index == -1:
            logger.info("Post not found for update", post_id=id)
            return None

        post = merge(store.posts[index], {**changes, "updated_at": utc_timestamp()})
        store.posts[index] = post

    logger.info("Post updated", post_id=id, fields=sorted(changes))
    return PostType.from_record(post)


async def delete_post(info: strawberry.Info, id: str) -> bool:
    """Remove a post; returns False when no post has this id."""
    store = get_store_from_info(info)

    with store.lock:
        index = store.post_index(id)
        if index == -1:
            logger.info("Post not found for delete", post_id=id)
            return False

        del store.posts[index]

    logger.info("Post deleted", post_id=id)
    return True
