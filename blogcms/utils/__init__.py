from blogcms.utils.helpers import host, slugify, today_str

__all__ = ["host", "slugify", "today_str"]
