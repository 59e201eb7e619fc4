# analytics/services/reports.py

"""
======================================================
PATH: analytics/services/reports.py
======================================================
ADMIN DASHBOARDS (READ-ONLY)

- traffic_overview():  page views, visitors, clicks, breakdowns, daily series
- popular_pages():     most viewed paths
- sales_dashboard():   order-based revenue summary

Windows are rolling: [now - days, now].
Revenue counts PAID orders only.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.db.models import Count, DecimalField, ExpressionWrapper, F, Q, Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from analytics.models import AnalyticsEvent
from orders.models import Order, OrderItem

TOP_PAGES = 10
TOP_PRODUCTS = 10


def _money(x) -> str:
    if x is None:
        return "0.00"
    return f"{Decimal(str(x)):.2f}"


def _since(days: int):
    return timezone.now() - timedelta(days=days)


def _breakdown(qs, field: str) -> dict:
    rows = qs.order_by().values(field).annotate(n=Count("id"))
    return {row[field] or "Unknown": row["n"] for row in rows}


def popular_pages(*, limit: int = TOP_PAGES, days: int | None = None) -> list[dict]:
    qs = AnalyticsEvent.objects.filter(type=AnalyticsEvent.TYPE_PAGEVIEW)
    if days:
        qs = qs.filter(timestamp__gte=_since(days))
    rows = (
        qs.order_by()
        .values("path")
        .annotate(views=Count("id"), unique_visitors=Count("session_id", distinct=True))
        .order_by("-views", "path")[:limit]
    )
    return [dict(row) for row in rows]


def traffic_overview(*, days: int = 7) -> dict:
    since = _since(days)
    events = AnalyticsEvent.objects.filter(timestamp__gte=since)
    pageviews = events.filter(type=AnalyticsEvent.TYPE_PAGEVIEW)

    series = (
        pageviews.order_by()
        .annotate(date=TruncDate("timestamp"))
        .values("date")
        .annotate(views=Count("id"))
        .order_by("date")
    )

    return {
        "days": days,
        "total_page_views": pageviews.count(),
        "unique_visitors": events.order_by().values("session_id").distinct().count(),
        "total_clicks": events.filter(type=AnalyticsEvent.TYPE_CLICK).count(),
        "device_breakdown": _breakdown(pageviews, "device_type"),
        "browser_breakdown": _breakdown(pageviews, "browser"),
        "top_pages": popular_pages(limit=TOP_PAGES, days=days),
        "page_views_over_time": [
            {"date": row["date"].isoformat(), "views": row["views"]} for row in series
        ],
    }


def sales_dashboard(*, days: int = 30) -> dict:
    orders = Order.objects.filter(created_at__gte=_since(days))
    paid = orders.filter(payment_status=Order.PAYMENT_PAID)

    counts = orders.aggregate(
        total=Count("id"),
        paid=Count("id", filter=Q(payment_status=Order.PAYMENT_PAID)),
        pending=Count("id", filter=Q(payment_status=Order.PAYMENT_PENDING)),
        failed=Count("id", filter=Q(payment_status=Order.PAYMENT_FAILED)),
    )
    revenue = paid.aggregate(v=Sum("total_amount"))["v"] or Decimal("0")
    average = (revenue / counts["paid"]) if counts["paid"] else Decimal("0")

    line_total = ExpressionWrapper(
        F("unit_price") * F("quantity"),
        output_field=DecimalField(max_digits=16, decimal_places=2),
    )
    top = (
        OrderItem.objects.filter(order__in=paid)
        .order_by()
        .values("product_id", "title")
        .annotate(quantity=Sum("quantity"), revenue=Sum(line_total))
        .order_by("-quantity", "-revenue")[:TOP_PRODUCTS]
    )

    by_date = (
        paid.order_by()
        .annotate(date=TruncDate("created_at"))
        .values("date")
        .annotate(orders=Count("id"), revenue=Sum("total_amount"))
        .order_by("date")
    )

    return {
        "days": days,
        "total_orders": counts["total"],
        "paid_orders": counts["paid"],
        "revenue": _money(revenue),
        "average_order_value": _money(average),
        "orders_by_status": {
            Order.PAYMENT_PAID: counts["paid"],
            Order.PAYMENT_PENDING: counts["pending"],
            Order.PAYMENT_FAILED: counts["failed"],
        },
        "top_products": [
            {
                "product_id": str(row["product_id"]) if row["product_id"] else None,
                "title": row["title"],
                "quantity": row["quantity"],
                "revenue": _money(row["revenue"]),
            }
            for row in top
        ],
        "revenue_by_date": [
            {"date": row["date"].isoformat(), "orders": row["orders"], "revenue": _money(row["revenue"])}
            for row in by_date
        ],
    }
