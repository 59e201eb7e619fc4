from .exceptions import PageNotFoundError
from .home_content import get_home_content, update_home_content

__all__ = [
    "PageNotFoundError",
    "get_home_content",
    "update_home_content",
]
