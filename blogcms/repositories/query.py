"""
Typed query description for post listings.

A `PostQuery` captures a listing pipeline (match, sort, lookups, projection,
skip, limit) without tying it to a database dialect. `PostRepository`
translates it into SQL; the projection is evaluated on the joined rows.

Summary
-------
Build a query fluently; every step returns a new frozen instance:

>>> query = (
...     PostQuery()
...     .match(status="published")
...     .sort_by("publish_date", SortDirection.DESC)
...     .lookup("categories", "category", alias="category")
...     .paginate(skip=0, limit=6)
... )
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum
from typing import Any
from uuid import UUID

type FilterValue = str | int | float | bool | UUID | datetime | None
type Document = Mapping[str, Any]


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Lookup:
    """
    Left join against another collection.

    Parameters
    ----------
    collection : str
        Name of the joined collection (``categories``, ``tags``...).
    local_field : str
        Field on the post holding the reference(s).
    alias : str
        Key under which the joined document(s) are exposed to projections.
    many : bool
        When True the local field holds a list of references and every
        match is kept; otherwise at most one document is joined and posts
        without a match are kept with ``None``.
    """

    collection: str
    local_field: str
    alias: str
    foreign_field: str = "id"
    many: bool = False


@dataclass(frozen=True)
class Project:
    """
    One output field of a projection.

    ``source`` is a dotted path into the joined document. A segment ending
    in ``[]`` maps the rest of the path over a list, so ``tags[].name``
    yields the names of every joined tag. Missing values resolve to None.
    """

    source: str
    date_format: str | None = None


@dataclass(frozen=True)
class PostQuery:
    filters: tuple[tuple[str, FilterValue], ...] = ()
    sort: tuple[tuple[str, SortDirection], ...] = ()
    lookups: tuple[Lookup, ...] = ()
    projection: Mapping[str, Project] = field(default_factory=dict)
    skip: int = 0
    limit: int | None = None

    def match(self, **filters: FilterValue) -> "PostQuery":
        return replace(self, filters=self.filters + tuple(filters.items()))

    def sort_by(self, field_name: str, direction: SortDirection = SortDirection.ASC) -> "PostQuery":
        return replace(self, sort=(*self.sort, (field_name, direction)))

    def lookup(
        self,
        collection: str,
        local_field: str,
        *,
        alias: str | None = None,
        many: bool = False,
    ) -> "PostQuery":
        join = Lookup(collection, local_field, alias or local_field, many=many)
        return replace(self, lookups=(*self.lookups, join))

    def project(self, **fields: Project | str) -> "PostQuery":
        projection = {
            name: spec if isinstance(spec, Project) else Project(spec) for name, spec in fields.items()
        }
        return replace(self, projection=projection)

    def paginate(self, skip: int, limit: int) -> "PostQuery":
        if skip < 0 or limit < 1:
            mssg = f"Invalid pagination window: skip={skip}, limit={limit}"
            raise ValueError(mssg)
        return replace(self, skip=skip, limit=limit)


def resolve_path(document: Any, path: str) -> Any:
    """
    Resolve a dotted projection path against a joined document.

    Args:
        document: Mapping (or None) to read from
        path: Dotted path, ``[]`` suffix maps over a list

    Returns:
        Any: Resolved value, None when any segment is missing
    """
    head, _, rest = path.partition(".")

    if head.endswith("[]"):
        items = document.get(head[:-2]) if isinstance(document, Mapping) else None
        if not items:
            return []
        return [resolve_path(item, rest) if rest else item for item in items]

    value = document.get(head) if isinstance(document, Mapping) else None
    if not rest:
        return value
    return resolve_path(value, rest)


def apply_projection(document: Document, projection: Mapping[str, Project]) -> dict[str, Any]:
    """Shape a joined document into the projected output fields."""
    if not projection:
        return dict(document)

    output: dict[str, Any] = {}
    for name, spec in projection.items():
        value = resolve_path(document, spec.source)
        if spec.date_format and isinstance(value, datetime):
            value = value.strftime(spec.date_format)
        output[name] = value
    return output
