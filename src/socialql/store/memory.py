"""
In-memory entity store for users, profiles and posts
"""

from __future__ import annotations

import dataclasses
import threading
from collections.abc import Mapping
from typing import Any, TypeVar

from .models import PostRecord, ProfileRecord, UserRecord

RecordT = TypeVar("RecordT")


def merge(record: RecordT, changes: Mapping[str, Any]) -> RecordT:
    """Shallow merge: copy ``record`` and overwrite every key present in ``changes``.

    Explicit ``None`` values overwrite too. Sequence fields are replaced as a whole.
    """
    if not changes:
        return record
    return dataclasses.replace(record, **changes)  # type: ignore[type-var]


class EntityStore:
    """Ordered collections of users, profiles and posts plus their id counters.

    Every lookup is a linear scan returning the first match. Callers that
    locate a record and then write it back must hold ``lock`` for the whole
    sequence.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.users: list[UserRecord] = []
        self.profiles: list[ProfileRecord] = []
        self.posts: list[PostRecord] = []
        self._user_counter = 0
        self._profile_counter = 0
        self._post_counter = 0

    def reset(self) -> None:
        """Drop all records and restart the id counters."""
        with self.lock:
            self.users.clear()
            self.profiles.clear()
            self.posts.clear()
            self._user_counter = 0
            self._profile_counter = 0
            self._post_counter = 0

    # Id allocation
    def next_user_id(self) -> str:
        with self.lock:
            value = self._user_counter
            self._user_counter += 1
            return str(value)

    def next_profile_id(self) -> str:
        with self.lock:
            value = self._profile_counter
            self._profile_counter += 1
            return str(value)

    def next_post_id(self) -> str:
        with self.lock:
            value = self._post_counter
            self._post_counter += 1
            return str(value)

    # Joins
    def find_user(self, user_id: str) -> UserRecord | None:
        return next((u for u in self.users if u.id == user_id), None)

    def find_post(self, post_id: str) -> PostRecord | None:
        return next((p for p in self.posts if p.id == post_id), None)

    def find_profile(self, user_id: str) -> ProfileRecord | None:
        """First profile whose owning user has ``user_id``."""
        return next((p for p in self.profiles if p.user.id == user_id), None)

    def posts_by_author(self, user_id: str) -> list[PostRecord]:
        """Posts whose stored author id matches, in insertion order."""
        return [p for p in self.posts if p.author.id == user_id]

    def user_index(self, user_id: str) -> int:
        return next((i for i, u in enumerate(self.users) if u.id == user_id), -1)

    def post_index(self, post_id: str) -> int:
        return next((i for i, p in enumerate(self.posts) if p.id == post_id), -1)

    def profile_index(self, user_id: str) -> int:
        return next((i for i, p in enumerate(self.profiles) if p.user.id == user_id), -1)
