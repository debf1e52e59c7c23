"""Base repository for database operations."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager, suppress
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from blogcms.errors.database import StoreUnavailableError, StoreValidationError
from blogcms.repositories.query import FilterValue

STORE_EXCEPTIONS = (
    SQLAlchemyError,
    OSError,
    ConnectionError,
    TimeoutError,
)


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing the point operations used by the services.

    Every write commits on its own: callers compose several point
    operations, not one transaction.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    @asynccontextmanager
    async def store_errors(self, action: str) -> AsyncGenerator[None]:
        """
        Translate driver failures into application errors.

        Args:
            action: Short description used in the error message

        Raises:
            StoreValidationError: If the database rejected a value
            StoreUnavailableError: For any other database failure
        """
        try:
            yield
        except (IntegrityError, DataError) as e:
            await self._rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            raise StoreValidationError(detail=f"Failed to {action}: {error_msg}") from e
        except STORE_EXCEPTIONS as e:
            await self._rollback()
            raise StoreUnavailableError(detail=f"Failed to {action}: {e}") from e

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        async with self.store_errors(f"load {self.model.__name__}"):
            result = await self.session.execute(statement)
            return result.scalar_one_or_none()

    async def exists(self, record_id: UUID) -> bool:
        """
        Check if a record exists.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if record exists, False otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(1).where(id_column == record_id).limit(1)
        async with self.store_errors(f"look up {self.model.__name__}"):
            result = await self.session.execute(statement)
            return result.scalar_one_or_none() is not None

    async def count(self, **filters: FilterValue) -> int:
        """
        Count records matching equality filters.

        Returns:
            int: Number of matching records
        """
        statement = select(func.count()).select_from(self.model)
        for field_name, value in filters.items():
            statement = statement.where(getattr(self.model, field_name) == value)

        async with self.store_errors(f"count {self.model.__name__}"):
            result = await self.session.execute(statement)
            count = result.scalar()
        return count if count is not None else 0

    async def insert(self, record: ModelT) -> ModelT:
        """Persist a new record and return it refreshed."""
        return await self._add_and_commit(record, action=f"save {self.model.__name__}")

    async def save(self, record: ModelT) -> ModelT:
        """Persist changes made to a loaded record."""
        return await self._add_and_commit(record, action=f"update {self.model.__name__}")

    async def delete_by_id(self, record_id: UUID) -> bool:
        """
        Locate and remove a record in a single statement.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if a record was deleted, False if none matched
        """
        id_column = getattr(self.model, self.id_field)
        statement = delete(self.model).where(id_column == record_id)
        async with self.store_errors(f"delete {self.model.__name__}"):
            result = await self.session.execute(statement)
            await self.session.commit()
        return bool(result.rowcount)

    async def _add_and_commit(self, record: ModelT, action: str) -> ModelT:
        async with self.store_errors(action):
            self.session.add(record)
            await self.session.commit()
            await self.session.refresh(record)
        return record

    async def _rollback(self) -> None:
        # The connection may already be gone; the first error is re-raised
        with suppress(*STORE_EXCEPTIONS):
            await self.session.rollback()
