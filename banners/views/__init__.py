from .banner import BannerViewSet

__all__ = ["BannerViewSet"]
