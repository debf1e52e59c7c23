"""Database models for the application."""

from blogcms.models.post import PostDB, PostStatus
from blogcms.models.taxonomy import CategoryDB, SubcategoryDB, TagDB
from blogcms.models.user import UserDB

__all__ = ["CategoryDB", "PostDB", "PostStatus", "SubcategoryDB", "TagDB", "UserDB"]
