from blogcms.configs.settings import (
    DEFAULT_PAGE,
    POST_CREATED_MESSAGE,
    POST_DELETED_MESSAGE,
    POST_UPDATED_MESSAGE,
    PUBLISH_DATE_FORMAT,
    TAG_SEPARATOR,
    LimiterConfig,
    Settings,
    settings,
)

__all__ = [
    "DEFAULT_PAGE",
    "POST_CREATED_MESSAGE",
    "POST_DELETED_MESSAGE",
    "POST_UPDATED_MESSAGE",
    "PUBLISH_DATE_FORMAT",
    "TAG_SEPARATOR",
    "LimiterConfig",
    "Settings",
    "settings",
]
