from blogcms.services.posts import PostMutationService, normalize_tags
from blogcms.services.read_model import PostReadModelBuilder
from blogcms.services.session import BearerSessionProvider, SessionProvider
from blogcms.services.storage import AssetStore, get_asset_store

__all__ = [
    "AssetStore",
    "BearerSessionProvider",
    "PostMutationService",
    "PostReadModelBuilder",
    "SessionProvider",
    "get_asset_store",
    "normalize_tags",
]
