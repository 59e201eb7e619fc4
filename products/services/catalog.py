# products/services/catalog.py

from __future__ import annotations

import logging

from products.models import Category

logger = logging.getLogger(__name__)


def recount_categories(category_ids) -> None:
    """Refresh the denormalized product_count for the given categories."""
    ids = {cid for cid in category_ids if cid}
    for category in Category.objects.filter(id__in=ids):
        count = category.products.filter(is_active=True).count()
        if category.product_count != count:
            Category.objects.filter(pk=category.pk).update(product_count=count)
            logger.debug(
                "Category product count refreshed",
                extra={"category_id": str(category.pk), "product_count": count},
            )
