"""
Post mutation service.

Create, update and delete posts. Every operation checks its payload first,
then the caller's session, then the target or references, and only then
touches the asset store and the database.

Known gaps
----------
- A featured image is uploaded before the post is saved. If saving fails the
  uploaded object is left behind in the asset store.
- Deleting a post does not remove its featured image.
"""

from asyncio import timeout
from secrets import randbelow
from uuid import UUID

from blogcms.configs import TAG_SEPARATOR, settings
from blogcms.errors.database import StoreValidationError
from blogcms.errors.posts import (
    InvalidTargetError,
    PostNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
    ValidationFailedError,
)
from blogcms.errors.upload import StorageError
from blogcms.models import PostDB, PostStatus
from blogcms.models.post import utc_now
from blogcms.monitoring import get_logger
from blogcms.repositories import PostRepository, UserRepository
from blogcms.repositories.post import as_uuid
from blogcms.schemas.asset import Asset
from blogcms.schemas.auth import SessionData
from blogcms.schemas.post import PostForm
from blogcms.services.storage import AssetStore
from blogcms.utils.helpers import slugify

logger = get_logger(__name__)


def normalize_tags(values: tuple[str, ...] | list[str]) -> list[str]:
    """
    Join submitted tag values and split them again, trimming each piece.

    A single value that itself contains the separator is split into several
    tags, and no values at all yields ``[""]``.
    """
    return [tag.strip() for tag in TAG_SEPARATOR.join(values).split(TAG_SEPARATOR)]


def random_asset_key(extension: str) -> str:
    """Object key for a new post's image: ``post-<11 digits>.<ext>``."""
    return f"post-{randbelow(9 * 10**10) + 10**10}.{extension}"


def post_asset_key(post_id: UUID, extension: str) -> str:
    """Stable object key for an existing post's image."""
    return f"post-{post_id}.{extension}"


def parse_reference(value: str, field_name: str) -> UUID:
    reference = as_uuid(value)
    if reference is None:
        mssg = f"Cast to UUID failed for value '{value}' at path '{field_name}'"
        raise StoreValidationError(detail=mssg)
    return reference


def parse_tag_references(tags: list[str]) -> list[str]:
    """Validate tag references, skipping the empty pieces left by normalization."""
    return [str(parse_reference(tag, "tags")) for tag in tags if tag]


def parse_status(value: str | None) -> str | None:
    """Check a submitted status; absent or empty values are stored as given."""
    if not value:
        return value
    try:
        return PostStatus(value).value
    except ValueError:
        mssg = f"'{value}' is not a valid value for path 'status'"
        raise StoreValidationError(detail=mssg) from None


class PostMutationService:
    """
    Apply post writes against the store.

    Parameters
    ----------
    posts : PostRepository
        Post collection.
    users : UserRepository
        Used only to confirm the session's user exists.
    assets : AssetStore
        Where featured images are uploaded.
    """

    def __init__(
        self,
        posts: PostRepository,
        users: UserRepository,
        assets: AssetStore,
    ) -> None:
        self.posts = posts
        self.users = users
        self.assets = assets

    async def authorize(self, session: SessionData | None) -> UUID:
        """
        Confirm the caller has a session backed by a stored user.

        Returns
        -------
        UUID
            The acting user's id.

        Raises
        ------
        UnauthorizedError
            If there is no session.
        UserNotFoundError
            If the session's user is not in the store.
        """
        if session is None:
            raise UnauthorizedError

        if not await self.users.exists(session.user_id):
            logger.warning("Session user not found", user_id=str(session.user_id))
            raise UserNotFoundError
        return session.user_id

    async def create(self, form: PostForm, session: SessionData | None) -> PostDB:
        """
        Create a post.

        Returns
        -------
        PostDB
            The persisted post.
        """
        if form.missing_required():
            raise ValidationFailedError

        user_id = await self.authorize(session)

        post = PostDB(
            title=form.title,
            slug=form.slug or slugify(form.title or "") or None,
            content=form.content,
            excerpt=form.excerpt,
            author=form.author,
            category=parse_reference(form.category or "", "category"),
            subcategory=parse_reference(form.subcategory or "", "subcategory"),
            tags=parse_tag_references(normalize_tags(form.tags)),
            meta_title=form.meta_title,
            meta_description=form.meta_description,
            meta_keywords=form.meta_keywords,
            featured_image="",
            image_credit=form.image_credit,
            status=parse_status(form.status),
        )

        if isinstance(form.featured_image, Asset):
            key = random_asset_key(form.featured_image.extension)
            post.featured_image = await self._upload(key, form.featured_image)

        post = await self.posts.insert(post)
        logger.info("Post created", post_id=str(post.id), user_id=str(user_id))
        return post

    async def update(self, form: PostForm, session: SessionData | None) -> PostDB:
        """
        Replace the editable fields of an existing post.

        Every editable field is overwritten, including with empty values.
        The featured image changes only when a new file is supplied.

        Returns
        -------
        PostDB
            The persisted post.
        """
        if form.missing_required():
            raise ValidationFailedError

        user_id = await self.authorize(session)

        if not form.id:
            raise InvalidTargetError

        post_id = as_uuid(form.id)
        post = await self.posts.get_by_id(post_id) if post_id is not None else None
        if post is None:
            raise PostNotFoundError

        post.title = form.title
        post.content = form.content
        post.excerpt = form.excerpt
        post.author = form.author
        post.category = parse_reference(form.category or "", "category")
        post.subcategory = parse_reference(form.subcategory or "", "subcategory")
        post.tags = parse_tag_references(normalize_tags(form.tags))
        post.meta_title = form.meta_title
        post.meta_description = form.meta_description
        post.meta_keywords = form.meta_keywords
        post.image_credit = form.image_credit
        post.status = parse_status(form.status)
        post.updated_date = utc_now()

        if isinstance(form.featured_image, Asset):
            key = post_asset_key(post.id, form.featured_image.extension)
            post.featured_image = await self._upload(key, form.featured_image)

        post = await self.posts.save(post)
        logger.info("Post updated", post_id=str(post.id), user_id=str(user_id))
        return post

    async def delete(self, post_id: str | None, session: SessionData | None) -> None:
        """
        Delete a post.

        The post's featured image, if any, stays in the asset store.
        """
        if not post_id:
            raise ValidationFailedError(detail="ID is required")

        user_id = await self.authorize(session)

        target = as_uuid(post_id)
        if target is None or not await self.posts.delete_by_id(target):
            raise PostNotFoundError

        logger.info("Post deleted", post_id=str(target), user_id=str(user_id))

    async def _upload(self, key: str, asset: Asset) -> str:
        """
        Upload a featured image, bounded by `ASSET_UPLOAD_TIMEOUT`.

        Raises
        ------
        StorageError
            If the upload fails or times out. Nothing is retried.
        """
        try:
            async with timeout(settings.ASSET_UPLOAD_TIMEOUT):
                url = await self.assets.upload(key, asset.data, asset.content_type)
        except TimeoutError as e:
            logger.exception("Featured image upload timed out", key=key)
            raise StorageError(detail=f"Uploading '{key}' timed out") from e
        except StorageError:
            raise
        except Exception as e:
            logger.exception("Featured image upload failed", key=key)
            raise StorageError(detail=f"Failed to upload '{key}': {e}") from e

        logger.info("Featured image uploaded", key=key)
        return url
