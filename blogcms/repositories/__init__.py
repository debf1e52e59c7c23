"""Repository layer for database operations."""

from blogcms.repositories.base import BaseRepository
from blogcms.repositories.post import PostRepository
from blogcms.repositories.query import Lookup, PostQuery, Project, SortDirection
from blogcms.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "Lookup",
    "PostQuery",
    "PostRepository",
    "Project",
    "SortDirection",
    "UserRepository",
]
