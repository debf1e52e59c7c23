"""Application dependencies.

Each request gets its own repositories, asset store and session; nothing is
looked up from module-level state inside the services.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blogcms.db import get_session
from blogcms.repositories import PostRepository, UserRepository
from blogcms.schemas.auth import SessionData
from blogcms.services import (
    AssetStore,
    BearerSessionProvider,
    PostMutationService,
    PostReadModelBuilder,
    SessionProvider,
    get_asset_store,
)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_post_repository(session: SessionDep) -> PostRepository:
    return PostRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


def get_session_provider(request: Request) -> SessionProvider:
    return BearerSessionProvider(request)


async def get_current_session(
    provider: Annotated[SessionProvider, Depends(get_session_provider)],
) -> SessionData | None:
    """Resolve the caller's session without rejecting anonymous requests."""
    return await provider.current_session()


PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
AssetStoreDep = Annotated[AssetStore, Depends(get_asset_store)]
CurrentSessionDep = Annotated[SessionData | None, Depends(get_current_session)]


def get_read_model_builder(posts: PostRepoDep) -> PostReadModelBuilder:
    return PostReadModelBuilder(posts)


def get_post_mutation_service(
    posts: PostRepoDep,
    users: UserRepoDep,
    assets: AssetStoreDep,
) -> PostMutationService:
    """
    Resolve the `PostMutationService` dependency.

    Parameters
    ----------
    posts : PostRepository
        Post repository bound to the request session.
    users : UserRepository
        User repository bound to the request session.
    assets : AssetStore
        Configured asset store.

    Returns
    -------
    PostMutationService
        Service instance for this request.
    """
    return PostMutationService(posts, users, assets)


ReadModelDep = Annotated[PostReadModelBuilder, Depends(get_read_model_builder)]
MutationServiceDep = Annotated[PostMutationService, Depends(get_post_mutation_service)]
