"""User repository for database operations."""

from blogcms.models.user import UserDB
from blogcms.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User lookups.

    Posts never mutate users; the mutation service only calls `exists` to
    check the session's actor.
    """

    model = UserDB
    id_field = "uuid"
