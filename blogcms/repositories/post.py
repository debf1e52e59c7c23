"""Post repository for database operations."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import aliased
from sqlmodel import SQLModel

from blogcms.models import CategoryDB, PostDB, SubcategoryDB, TagDB
from blogcms.monitoring import get_logger
from blogcms.repositories.base import BaseRepository
from blogcms.repositories.query import Lookup, PostQuery, SortDirection, apply_projection

logger = get_logger(__name__)

COLLECTIONS: dict[str, type[SQLModel]] = {
    "categories": CategoryDB,
    "subcategories": SubcategoryDB,
    "tags": TagDB,
}


def as_uuid(value: object) -> UUID | None:
    """Parse a reference into a UUID, returning None when it is not one."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


class PostRepository(BaseRepository[PostDB]):
    """
    Repository for Post database operations.

    Besides the point operations inherited from `BaseRepository`, it runs
    `PostQuery` listings: single-reference lookups become LEFT OUTER JOINs,
    list-reference lookups are resolved with one extra IN query.
    """

    model = PostDB

    async def aggregate(self, query: PostQuery) -> list[dict[str, Any]]:
        """
        Run a listing query and return projected documents.

        Args:
            query: Typed query description

        Returns:
            list[dict[str, Any]]: Projected rows in query order
        """
        single = [lookup for lookup in query.lookups if not lookup.many]
        many = [lookup for lookup in query.lookups if lookup.many]
        joined = [aliased(COLLECTIONS[lookup.collection]) for lookup in single]

        statement = select(PostDB, *joined)
        for lookup, target in zip(single, joined, strict=True):
            statement = statement.outerjoin(
                target,
                getattr(PostDB, lookup.local_field) == getattr(target, lookup.foreign_field),
            )

        for field_name, value in query.filters:
            statement = statement.where(getattr(PostDB, field_name) == value)

        for field_name, direction in query.sort:
            column = getattr(PostDB, field_name)
            statement = statement.order_by(
                column.desc() if direction is SortDirection.DESC else column.asc(),
            )

        statement = statement.offset(query.skip)
        if query.limit is not None:
            statement = statement.limit(query.limit)

        async with self.store_errors("list posts"):
            rows = (await self.session.execute(statement)).all()

            documents: list[dict[str, Any]] = []
            for post, *matches in rows:
                document = post.model_dump()
                for lookup, match in zip(single, matches, strict=True):
                    document[lookup.alias] = match.model_dump() if match is not None else None
                documents.append(document)

            for lookup in many:
                await self._resolve_many(documents, lookup)

        logger.debug("Listed posts", count=len(documents), skip=query.skip, limit=query.limit)
        return [apply_projection(document, query.projection) for document in documents]

    async def _resolve_many(self, documents: list[dict[str, Any]], lookup: Lookup) -> None:
        """
        Replace a list of references with the documents they resolve to.

        Order follows the reference list; references with no match are dropped.
        """
        target = COLLECTIONS[lookup.collection]
        wanted = {
            ref
            for document in documents
            for ref in map(as_uuid, document.get(lookup.local_field) or [])
            if ref is not None
        }

        found: dict[UUID, dict[str, Any]] = {}
        if wanted:
            foreign = getattr(target, lookup.foreign_field)
            result = await self.session.execute(select(target).where(foreign.in_(list(wanted))))
            found = {getattr(item, lookup.foreign_field): item.model_dump() for item in result.scalars()}

        for document in documents:
            refs = [as_uuid(ref) for ref in document.get(lookup.local_field) or []]
            document[lookup.alias] = [found[ref] for ref in refs if ref in found]
