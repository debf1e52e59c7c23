"""
Post Routes.

Public listing and authenticated create/update/delete for blog posts.

Summary
-------
Endpoints (all on ``/api/posts``):
  - GET: list published posts, paginated
  - POST: create a post from a multipart form
  - PUT: update a post from a multipart form (``_id`` selects the post)
  - DELETE: delete a post named in a JSON body ``{"id": ...}``

Dependencies
------------
  - `ReadModelDep`: builds listing pages.
  - `MutationServiceDep`: applies writes; receives the caller's session.

Errors raised by the services are rendered by the application exception
handlers as ``{"status": "error", "message": ...}``.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Query, Request
from fastapi.responses import ORJSONResponse
from starlette.datastructures import FormData, UploadFile
from starlette.status import HTTP_200_OK, HTTP_201_CREATED

from blogcms.configs import (
    DEFAULT_PAGE,
    POST_CREATED_MESSAGE,
    POST_DELETED_MESSAGE,
    POST_UPDATED_MESSAGE,
    settings,
)
from blogcms.dependencies import CurrentSessionDep, MutationServiceDep, ReadModelDep
from blogcms.managers import limiter
from blogcms.schemas.asset import Asset, AssetPayload, NoAsset
from blogcms.schemas.post import (
    DeletePostRequest,
    ErrorResponse,
    MessageResponse,
    PostForm,
    PostListing,
)

router = APIRouter(prefix="/api/posts", tags=["📝 Posts"])

WRITE_ERRORS = {
    400: {
        "description": "Missing field or invalid value",
        "content": ErrorResponse.example("Title, content, author, category, and subcategory are required"),
    },
    401: {"description": "No session", "content": ErrorResponse.example("Unauthorized")},
    404: {"description": "User or post not found", "content": ErrorResponse.example("Post not found")},
    500: {"description": "Store or upload failure", "content": ErrorResponse.example("Database Error")},
}


def form_text(form: FormData, key: str) -> str | None:
    value = form.get(key)
    return value if isinstance(value, str) else None


async def read_asset(form: FormData) -> AssetPayload:
    """Turn the ``featuredImage`` part into an `Asset`, when it is a real file."""
    value = form.get("featuredImage")
    if not isinstance(value, UploadFile) or not value.filename:
        return NoAsset()

    data = await value.read()
    return Asset(data=data, content_type=value.content_type or "application/octet-stream")


async def read_post_form(request: Request) -> PostForm:
    """
    Parse a multipart/urlencoded post form.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    PostForm
        Submitted values; absent fields are None.
    """
    form = await request.form()
    return PostForm(
        id=form_text(form, "_id"),
        title=form_text(form, "title"),
        slug=form_text(form, "slug"),
        content=form_text(form, "content"),
        excerpt=form_text(form, "excerpt"),
        author=form_text(form, "author"),
        category=form_text(form, "category"),
        subcategory=form_text(form, "subcategory"),
        tags=tuple(tag for tag in form.getlist("tags") if isinstance(tag, str)),
        meta_title=form_text(form, "metaTitle"),
        meta_description=form_text(form, "metaDescription"),
        meta_keywords=form_text(form, "metaKeywords"),
        image_credit=form_text(form, "imageCredit"),
        status=form_text(form, "status"),
        featured_image=await read_asset(form),
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=PostListing,
    summary="List published posts",
    description="Published posts, newest first, with category, subcategory and tag names.",
    responses={
        500: {"description": "Store unavailable", "content": ErrorResponse.example("Failed to list posts")},
    },
    operation_id="posts_list",
)
@limiter.limit("60/minute")
async def list_posts(
    request: Request,
    builder: ReadModelDep,
    page: Annotated[int, Query(ge=1, description="1-based page number")] = DEFAULT_PAGE,
    limit: Annotated[
        int | None,
        Query(ge=1, description="Posts per page (defaults to DEFAULT_PAGE_LIMIT)"),
    ] = None,
) -> PostListing:
    """
    List published posts.

    Parameters
    ----------
    request : Request
        Current request context.
    builder : PostReadModelBuilder
        Listing builder dependency.
    page : int
        Page number, starting at 1.
    limit : int | None
        Page size.

    Returns
    -------
    PostListing
        ``{"posts": [...], "totalPages": n}``
    """
    return await builder.build_listing(page=page, limit=limit or settings.DEFAULT_PAGE_LIMIT)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a post",
    responses=WRITE_ERRORS,
    operation_id="posts_create",
)
@limiter.limit("20/minute")
async def create_post(
    request: Request,
    service: MutationServiceDep,
    session: CurrentSessionDep,
) -> ORJSONResponse:
    """Create a post from a multipart form with an optional ``featuredImage`` file."""
    form = await read_post_form(request)
    await service.create(form, session)
    return ORJSONResponse({"message": POST_CREATED_MESSAGE}, status_code=HTTP_201_CREATED)


@router.put(
    "",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    status_code=HTTP_200_OK,
    summary="Update a post",
    responses=WRITE_ERRORS,
    operation_id="posts_update",
)
@limiter.limit("20/minute")
async def update_post(
    request: Request,
    service: MutationServiceDep,
    session: CurrentSessionDep,
) -> ORJSONResponse:
    """Replace a post's editable fields; ``_id`` names the post."""
    form = await read_post_form(request)
    await service.update(form, session)
    return ORJSONResponse({"message": POST_UPDATED_MESSAGE}, status_code=HTTP_200_OK)


@router.delete(
    "",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    status_code=HTTP_200_OK,
    summary="Delete a post",
    responses=WRITE_ERRORS,
    operation_id="posts_delete",
)
@limiter.limit("20/minute")
async def delete_post(
    request: Request,
    service: MutationServiceDep,
    session: CurrentSessionDep,
    payload: Annotated[DeletePostRequest | None, Body()] = None,
) -> ORJSONResponse:
    """Delete the post named by ``{"id": ...}``."""
    await service.delete(payload.id if payload else None, session)
    return ORJSONResponse({"message": POST_DELETED_MESSAGE}, status_code=HTTP_200_OK)
