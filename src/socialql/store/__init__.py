"""
Entity store for SocialQL backend
"""

from .memory import EntityStore, merge
from .models import (
    CommentRecord,
    PostRecord,
    ProfileRecord,
    SocialLinkRecord,
    UserRecord,
    utc_timestamp,
)

__all__ = [
    "CommentRecord",
    "EntityStore",
    "PostRecord",
    "ProfileRecord",
    "SocialLinkRecord",
    "UserRecord",
    "merge",
    "utc_timestamp",
]
