"""
SocialQL Backend
In-memory GraphQL API for users, profiles and posts
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
