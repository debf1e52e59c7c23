"""
Public post listing.

Builds the denormalized read model served to listing clients: published
posts, newest first, with category, subcategory and tag names resolved.
"""

from math import ceil

from blogcms.configs import DEFAULT_PAGE, PUBLISH_DATE_FORMAT, settings
from blogcms.errors.database import StoreUnavailableError, StoreValidationError
from blogcms.models import PostStatus
from blogcms.monitoring import get_logger
from blogcms.repositories import PostQuery, PostRepository, Project, SortDirection
from blogcms.schemas.post import PostListing, PostListItem

logger = get_logger(__name__)

PUBLISHED_POSTS = (
    PostQuery()
    .match(status=PostStatus.PUBLISHED.value)
    .sort_by("publish_date", SortDirection.DESC)
    .lookup("categories", "category")
    .lookup("subcategories", "subcategory")
    .lookup("tags", "tags", many=True)
    .project(
        _id="id",
        title="title",
        slug="slug",
        content="content",
        excerpt="excerpt",
        author="author",
        category="category.id",
        subcategory="subcategory.id",
        tags="tags[].id",
        publish_date=Project("publish_date", date_format=PUBLISH_DATE_FORMAT),
        categoryName="category.name",
        subcategoryName="subcategory.name",
        tagNames="tags[].name",
        metaTitle="meta_title",
        metaDescription="meta_description",
        metaKeywords="meta_keywords",
        featuredImage="featured_image",
        imageCredit="image_credit",
        status="status",
        updated_date="updated_date",
    )
)


class PostReadModelBuilder:
    """Compose pages of the public post listing from the store."""

    def __init__(self, posts: PostRepository) -> None:
        self.posts = posts

    async def build_listing(
        self,
        page: int = DEFAULT_PAGE,
        limit: int | None = None,
    ) -> PostListing:
        """
        Build one page of published posts.

        Args:
            page: 1-based page number
            limit: Page size, defaults to `DEFAULT_PAGE_LIMIT`

        Returns:
            PostListing: Posts on the page and the total page count

        Raises:
            ValueError: If page or limit is below 1
            StoreUnavailableError: If the store cannot be queried
        """
        limit = settings.DEFAULT_PAGE_LIMIT if limit is None else limit
        if page < 1 or limit < 1:
            mssg = f"page and limit must be >= 1 (got page={page}, limit={limit})"
            raise ValueError(mssg)

        query = PUBLISHED_POSTS.paginate(skip=(page - 1) * limit, limit=limit)
        try:
            documents = await self.posts.aggregate(query)
            # Counted separately so the page count reflects every published post
            total = await self.posts.count(status=PostStatus.PUBLISHED.value)
        except StoreValidationError as e:
            raise StoreUnavailableError(detail=e.detail) from e

        logger.info("Built post listing", page=page, limit=limit, returned=len(documents), total=total)
        return PostListing(
            posts=[PostListItem.model_validate(document) for document in documents],
            total_pages=ceil(total / limit),
        )
