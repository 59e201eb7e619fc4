from .exceptions import BannerNotFoundError
from .targeting import banners_for_page, track_click, track_view

__all__ = [
    "BannerNotFoundError",
    "banners_for_page",
    "track_click",
    "track_view",
]
