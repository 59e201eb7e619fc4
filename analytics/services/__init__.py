from .reports import popular_pages, sales_dashboard, traffic_overview
from .tracking import hash_ip, record_event
from .user_agent import parse_user_agent

__all__ = [
    "hash_ip",
    "parse_user_agent",
    "popular_pages",
    "record_event",
    "sales_dashboard",
    "traffic_overview",
]
