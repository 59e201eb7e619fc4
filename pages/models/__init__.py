from .home_content import HomeContent
from .page import Page

__all__ = [
    "HomeContent",
    "Page",
]
