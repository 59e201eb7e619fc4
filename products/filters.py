# products/filters.py

import django_filters
from django.db.models import Q

from products.models import Product


class ProductFilter(django_filters.FilterSet):
    """
    Storefront product filters.

    ?category=<slug>&on_sale=true&featured=true&search=<text>
    """

    category = django_filters.CharFilter(method="filter_category")
    on_sale = django_filters.BooleanFilter(field_name="on_sale")
    featured = django_filters.BooleanFilter(field_name="featured")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Product
        fields = ["category", "on_sale", "featured", "search"]

    def filter_category(self, queryset, name, value):
        slug = (value or "").strip().lower()
        if not slug:
            return queryset
        return queryset.filter(categories__slug=slug).distinct()

    def filter_search(self, queryset, name, value):
        term = (value or "").strip()
        if not term:
            return queryset
        # tags is a JSON list; a text match on its serialized form works on every backend
        return queryset.filter(
            Q(title__icontains=term) | Q(description__icontains=term) | Q(tags__icontains=term)
        )
