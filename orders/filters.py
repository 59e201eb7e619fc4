# orders/filters.py

import django_filters
from django.db.models import Q

from orders.models import Order


class AdminOrderFilter(django_filters.FilterSet):
    """
    ?search=&payment_status=&fulfillment_status=&from_date=&to_date=
    """

    search = django_filters.CharFilter(method="filter_search")
    payment_status = django_filters.ChoiceFilter(choices=Order.PAYMENT_STATUS_CHOICES)
    fulfillment_status = django_filters.ChoiceFilter(choices=Order.FULFILLMENT_STATUS_CHOICES)
    from_date = django_filters.DateFilter(field_name="created_at", lookup_expr="date__gte")
    to_date = django_filters.DateFilter(field_name="created_at", lookup_expr="date__lte")

    class Meta:
        model = Order
        fields = ["search", "payment_status", "fulfillment_status", "from_date", "to_date"]

    def filter_search(self, queryset, name, value):
        term = (value or "").strip()
        if not term:
            return queryset
        return queryset.filter(
            Q(order_number__icontains=term)
            | Q(customer_name__icontains=term)
            | Q(customer_email__icontains=term)
            | Q(customer_phone__icontains=term)
        )
